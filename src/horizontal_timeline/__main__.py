import sys

from horizontal_timeline.cli import main

sys.exit(main())
