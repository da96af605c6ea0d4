"""Run the command-line validator: ``python -m jsonsyntax [FILE]``."""

import sys

from jsonsyntax.cli import main

sys.exit(main())
