import sys

from mmac.cli import main

sys.exit(main())
