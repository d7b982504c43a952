import sys

from isilon_check.cli import main

sys.exit(main())
