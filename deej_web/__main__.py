import sys

from deej_web.cli import main

sys.exit(main())
