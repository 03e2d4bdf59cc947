"""Allow ``python -m liveshows.cli`` execution."""

import sys

from liveshows.cli.shows import main

sys.exit(main())
