import sys

from pokerpile.ui.cli.cli_demo import main

sys.exit(main())
