"""
Test suite for the sparse polynomial package

Contains:
- tests/unit/          : Unit tests for individual modules
"""
