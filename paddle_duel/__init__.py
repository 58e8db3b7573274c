"""
Paddle Duel - two-player paddle and ball arcade game
"""

__version__ = "0.1.0"
