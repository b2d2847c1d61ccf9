"""
Test suite for core primitives

Contains:
- tests/unit/          : Unit tests for individual modules
"""
