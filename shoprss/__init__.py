"""
Fortnite item shop RSS feed generator.
"""

__version__ = "1.0.0"
