"""Allow ``python -m ftlsim``."""

import sys

from .cli import main

sys.exit(main())
