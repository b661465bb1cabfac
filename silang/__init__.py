"""SI language front end.

A single-line-statement scripting language: each line of a ``.si`` script is
tokenized, parsed into one statement and evaluated immediately against an
environment that persists for the whole run.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

__version__ = "0.1.0"
