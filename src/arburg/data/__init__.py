"""
Evaluation components for arburg.
"""

from arburg.data.window import Window

__all__ = ['Window']
