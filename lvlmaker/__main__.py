import sys

from lvlmaker.cli import main

sys.exit(main())
