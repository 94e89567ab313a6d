import sys

from parlex.cli import main

sys.exit(main())
