"""
Libs Layer - Pluggable abstraction layer.

This package contains the factory pattern implementations for
pluggable components:
- Splitters
"""

__all__ = []
