import sys

from personnummer.cli import main

sys.exit(main())
