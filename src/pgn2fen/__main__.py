"""Allow ``python -m pgn2fen``."""

import sys

from pgn2fen.app import main

sys.exit(main())
