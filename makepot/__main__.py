import sys

from .make_pot import main


sys.exit(main())
