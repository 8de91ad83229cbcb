"""
Adapters package - External service connections.
"""

from adapters import gemini_adapter

__all__ = ["gemini_adapter"]
