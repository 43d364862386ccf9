import sys

from tileview.cli import main

sys.exit(main())
