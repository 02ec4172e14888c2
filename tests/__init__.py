"""
Test suite for the big integer engine

Contains:
- tests/unit/          : Unit and property-based tests for individual modules
"""
