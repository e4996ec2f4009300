import sys

from henry_calcs.cli import main

sys.exit(main())
