"""Allow running as ``python -m pumplaunch``."""

import sys

from pumplaunch.main import main

sys.exit(main())
