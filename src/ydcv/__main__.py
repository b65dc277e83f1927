import sys

from ydcv.main import main

sys.exit(main())
