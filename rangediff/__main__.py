import sys

from rangediff.cli import main

sys.exit(main())
