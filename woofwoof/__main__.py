"""Allow ``python -m woofwoof``."""

import sys

from woofwoof.cli import main

sys.exit(main())
