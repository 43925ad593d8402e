import sys

from matrixgames.cli import main

sys.exit(main())
