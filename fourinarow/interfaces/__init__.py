"""
fourinarow.interfaces - Text interface for playing against the engine
"""

# Don't import anything here to avoid circular imports
__all__ = []
