import sys

from irregularity_detector.cli import main

sys.exit(main())
