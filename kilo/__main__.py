import sys
from kilo.main import main

sys.exit(main())
