"""Supporter matching for the peer-support marketplace.

Scores and ranks candidate supporters against a client's stated preferences.
"""

__version__ = "0.1.0"
