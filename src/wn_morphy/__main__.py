import sys

from wn_morphy.cli import main

sys.exit(main())
