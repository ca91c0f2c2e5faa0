import sys

from bbtree.cli import main

sys.exit(main())
