"""
lexscan Command-Line Tools
==========================

- lexscan: tokenize C-like source and print the token list

Copyright (c) 2026 lexscan Developers & Contributors
"""
