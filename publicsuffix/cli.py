"""Command line front end for publicsuffix."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .api import public_suffix, registrable_domain
from .core.config import ConfigError, ConfigManager
from .core.constants import APP_NAME, APP_VERSION, NO_MATCH_PLACEHOLDER
from .core.logging_config import setup_logging
from .core.models import MatchOptions
from .core.rule_store import RuleStoreError, load_rule_store

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Print the public suffix (or registrable domain) of each domain.",
    )
    p.add_argument("domains", nargs="+", metavar="DOMAIN", help="Domain names to look up.")
    p.add_argument("--registrable", action="store_true", help="Print the registrable domain instead of the public suffix.")
    p.add_argument(
        "--ignore-private",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Match ICANN rules only (--no-ignore-private overrides the config file).",
    )
    p.add_argument("--data-file", type=Path, default=None, help="Suffix list file. Default: the bundled list.")
    p.add_argument("--config", type=Path, default=None, help="JSON config file.")
    p.add_argument("--log-file", type=Path, default=None, help="Write a rotating debug log to this file.")
    p.add_argument("--debug", action="store_true", help="Log debug output to stderr.")
    p.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    return p


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Command line entry point.

    Returns:
        Exit code (0 for success, 1 when config or rules cannot be loaded)
    """
    args = _build_parser().parse_args(argv)
    setup_logging(debug_mode=args.debug, log_file=args.log_file)

    try:
        config = ConfigManager(config_path=args.config)
        data_file = args.data_file or config.data_file
        store = load_rule_store(data_file)
    except (ConfigError, RuleStoreError) as e:
        logger.error("%s", e)
        return 1

    options = config.match_options
    if args.ignore_private is not None:
        options = MatchOptions(ignore_private=args.ignore_private)

    lookup = registrable_domain if args.registrable else public_suffix
    for domain in args.domains:
        result = lookup(domain, options, store=store)
        print(f"{domain}\t{result if result is not None else NO_MATCH_PLACEHOLDER}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
