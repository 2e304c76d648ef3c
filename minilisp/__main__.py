import sys

from minilisp.cmdline import main

sys.exit(main())
