import sys

from autotranslate.cli import main

sys.exit(main())
