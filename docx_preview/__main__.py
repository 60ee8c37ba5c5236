"""
Entry point for running docx_preview as a module.

Usage:
    python -m docx_preview render input.docx --output output.html
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
