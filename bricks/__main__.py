import sys

from bricks.main import main

sys.exit(main())
