"""
Core Layer - Shared configuration and data contracts.

This package contains:
- Configuration management (settings.py)
- Result and unit types (types.py)
- Error taxonomy (errors.py)
"""

__all__ = []
