"""Shared pytest fixtures for publicsuffix tests."""

import logging
import shutil
import tempfile
from pathlib import Path

import pytest

from publicsuffix.core.rule_store import clear_cache, parse_rules


SAMPLE_PSL = """\
// Sample list used by the unit tests.

// ===BEGIN ICANN DOMAINS===

com
io
jp
uk
co.uk

// Wildcard with an exception underneath
kawasaki.jp
*.kawasaki.jp
!city.kawasaki.jp

// Wildcard only, no exact rule for the TLD
*.ck
!www.ck

// ===END ICANN DOMAINS===
// ===BEGIN PRIVATE DOMAINS===

github.io
blogspot.com
*.hosted.io
!www.hosted.io

// ===END PRIVATE DOMAINS===
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    yield path
    shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_psl_text():
    """Return a small suffix list in the published format."""
    return SAMPLE_PSL


@pytest.fixture
def sample_store(sample_psl_text):
    """Return a RuleStore parsed from the sample list."""
    return parse_rules(sample_psl_text)


@pytest.fixture
def sample_psl_file(temp_dir, sample_psl_text):
    """Write the sample list to a temporary file."""
    path = temp_dir / "public_suffix_list.dat"
    path.write_text(sample_psl_text, encoding="utf-8")
    return path


@pytest.fixture
def temp_config_file(temp_dir):
    """Create a temporary config file path."""
    return temp_dir / "config.json"


@pytest.fixture
def valid_config_data():
    """Return valid configuration data."""
    return {
        "version": 1,
        "settings": {
            "ignore_private": True,
            "data_file": None,
        },
    }


@pytest.fixture(autouse=True)
def clear_rule_cache():
    """Clear the rule store cache before and after each test."""
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after a test reconfigures logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
