import sys
import os

# Ensure we can import lust package
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from lust.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
