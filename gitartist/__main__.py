"""Allow ``python -m gitartist``."""

import sys

from gitartist.cli import main

sys.exit(main())
