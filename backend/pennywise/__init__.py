"""
Pennywise: view-model service for a personal finance tracker.
"""

__version__ = "1.0.0"
