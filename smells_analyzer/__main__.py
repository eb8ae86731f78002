import sys

from smells_analyzer.cli import main

sys.exit(main())
