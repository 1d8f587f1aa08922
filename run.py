#!/usr/bin/env python3
"""
Isomap Launcher
Run this script to generate a keyboard mapping from the command line.
"""

if __name__ == "__main__":
    import sys
    from isomap.main import main
    sys.exit(main())
