#!/usr/bin/env python3
"""
Clipboard History Viewer for Linux (Windows 11 Style) - Qt6 Version
Run directly: python main.py [--hidden] [--config PATH]
"""

import sys

from clipview.app import main

if __name__ == "__main__":
    sys.exit(main())
