import sys

from gateway_emit.cli import main

sys.exit(main())
