"""
Division Elimination

Decides which teams in a round-robin division can no longer finish first,
with a certificate of teams proving each elimination.
"""

__version__ = "1.0.0"
