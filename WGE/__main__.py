import sys

from WGE.cli import main

sys.exit(main())
