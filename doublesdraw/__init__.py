"""
Doubles draw generator for two-team club sessions.
"""
__version__ = "0.1.0"
