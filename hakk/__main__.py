import sys

from hakk.cli import main

sys.exit(main())
