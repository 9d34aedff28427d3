import sys
from twconfig.cli import main

if __name__ == "__main__":
    sys.exit(main())
