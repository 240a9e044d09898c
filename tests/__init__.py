"""
Test suite for bytetypes

Contains:
- tests/unit/          : Unit tests for individual modules
"""
