"""
Myracloud CLI.

Command-line tooling for managing cache settings and redirects
through the Myracloud web API.
"""
