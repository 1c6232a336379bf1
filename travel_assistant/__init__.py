"""
Travel Assistant - ride-share offers and needs organized by US state.
"""

__version__ = "1.0.0"
