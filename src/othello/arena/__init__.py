"""
Arena module for running matches between computer strategies.
"""
from .arena import Arena, GameRecord

__all__ = ['Arena', 'GameRecord']
