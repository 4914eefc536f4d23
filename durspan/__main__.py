import sys

from durspan.cli import main

sys.exit(main())
