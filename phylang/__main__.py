#!/usr/bin/env python3
"""Allow running as: python -m phylang"""

import sys

from phylang.cli import main

if __name__ == '__main__':
    sys.exit(main())
