"""Allow running as ``python -m replyparser``."""

import sys

from replyparser.cli import main

sys.exit(main())
