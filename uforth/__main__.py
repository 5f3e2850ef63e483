import sys

from uforth.repl import main

sys.exit(main())
