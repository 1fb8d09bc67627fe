import sys

from atlas_cutter.cli import main

sys.exit(main())
