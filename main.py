#!/usr/bin/env python3
"""
Book Pictures - Command Line
============================
Run the command line from a source checkout: ``python main.py <command> ...``.
The installed console script is ``book-pictures``.
"""

import sys

from book_pictures.cli import main

if __name__ == '__main__':
    sys.exit(main())
