"""Narrative Coach - story structure, tension and pacing analysis"""

__version__ = "0.1.0"
