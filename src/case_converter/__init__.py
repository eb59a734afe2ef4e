"""
Case Converter - A small interactive CLI for changing the letter case of a text file.

This package provides functionality to:
- Ask the user for a case mode (upper or lower) and an optional move
- Read a text file into memory line by line
- Rewrite the file in place with every letter upper- or lowercased
- Move the rewritten file from a source directory to a destination directory
"""

__version__ = "0.1.0"
__author__ = "Case Converter Team"
