import sys

from stresstest.cli import main

sys.exit(main())
