#!/usr/bin/env python3
"""
gameprefs - Preset-profile settings store
Entry point script for running from a source checkout
"""

import sys
from gameprefs.__main__ import main
if __name__ == "__main__":
    sys.exit(main())
