"""
Observability Layer - Logging.

This package contains observability components:
- Human-readable stderr logger
"""

__all__ = []
