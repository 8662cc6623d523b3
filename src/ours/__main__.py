import sys

from ours.cli import main

sys.exit(main())
