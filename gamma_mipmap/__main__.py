import sys

from gamma_mipmap.cli import main

sys.exit(main())
