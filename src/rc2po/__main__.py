"""Allow `python -m rc2po input-path output-path`."""

import sys

from rc2po.cli import main

sys.exit(main())
