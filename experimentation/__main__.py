import sys

from experimentation.cli import main

sys.exit(main())
