import sys

from shoprss.cli import main

sys.exit(main())
