import sys

from featuredocs.cli import main

sys.exit(main())
