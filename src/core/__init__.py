"""
Core domain models and mathematical primitives.

This module contains the sparse polynomial value type and the epsilon
helpers it relies on. It has no dependencies on external systems.
"""
