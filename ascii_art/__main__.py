"""Allow ``python -m ascii_art``."""

import sys

from .cli import cli_main

sys.exit(cli_main())
