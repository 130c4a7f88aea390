"""Entry point for ``python -m hollow_codegen``."""

import sys

from .cli import main

sys.exit(main())
