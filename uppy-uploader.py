#!/usr/bin/env python3
"""
uppy - Command Line Interface
Uploads a file to the configured host and copies the returned URL to the clipboard
"""

import sys

from uppy import uppy

if __name__ == "__main__":
    sys.exit(uppy.main())
