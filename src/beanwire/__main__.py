import sys

from beanwire.cli import main

sys.exit(main())
