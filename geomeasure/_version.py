"""
Exposes the version of geomeasure
"""

__version__ = 'v0.3.1'

__all__ = ['__version__']
