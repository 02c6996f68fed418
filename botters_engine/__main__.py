import sys

from botters_engine.cli import main

sys.exit(main())
