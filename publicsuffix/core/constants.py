"""Application constants and paths for publicsuffix."""

import os
from pathlib import Path

# Application metadata
APP_NAME = "publicsuffix"
APP_VERSION = "1.0.0"
CONFIG_VERSION = 1

# Base paths
PACKAGE_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PACKAGE_ROOT / "data"
DEFAULT_PSL_FILE = DATA_DIR / "public_suffix_list.dat"

HOME_ENV_VAR = "PUBLICSUFFIX_HOME"
CONFIG_DIR = Path(os.environ.get(HOME_ENV_VAR) or Path.home() / ".publicsuffix")
CONFIG_FILE = CONFIG_DIR / "config.json"

# Logging settings
LOG_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
LOG_BACKUP_COUNT = 3

# Suffix list syntax
COMMENT_PREFIX = "//"
EXCEPTION_PREFIX = "!"
WILDCARD_LABEL = "*"
LABEL_SEPARATOR = "."

# Section markers that switch the origin of the rules that follow
BEGIN_ICANN_MARKER = "===BEGIN ICANN DOMAINS==="
END_ICANN_MARKER = "===END ICANN DOMAINS==="
BEGIN_PRIVATE_MARKER = "===BEGIN PRIVATE DOMAINS==="
END_PRIVATE_MARKER = "===END PRIVATE DOMAINS==="

# Default settings
DEFAULT_SETTINGS = {
    "ignore_private": False,
    "data_file": None,
}

# Printed by the CLI when a domain has no public suffix / registrable domain
NO_MATCH_PLACEHOLDER = "-"
