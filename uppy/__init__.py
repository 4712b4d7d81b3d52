#!/usr/bin/env python3
"""
uppy - upload a file and copy its URL to the clipboard.
"""

__version__ = "0.1.0"
