import sys

from vectoricon.cli import main

sys.exit(main())
