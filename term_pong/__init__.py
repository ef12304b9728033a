"""
Terminal Pong - two-player Pong on a character grid
"""

__version__ = "0.1.0"
