"""Application entry point for publicsuffix.

Runs the command line front end; see publicsuffix.cli for options.
"""

import sys

from publicsuffix.cli import main


if __name__ == "__main__":
    sys.exit(main())
