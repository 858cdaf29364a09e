"""Allow running resolve_it with ``python -m resolve_it``."""

import sys

from resolve_it.cli.main import main

sys.exit(main())
