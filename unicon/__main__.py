import sys

from unicon.cli import main

sys.exit(main())
