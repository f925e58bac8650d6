import sys

from pymardia.cli import main

sys.exit(main())
