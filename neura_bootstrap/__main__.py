import sys

from neura_bootstrap.pipeline import main

sys.exit(main())
