"""
Test suite for radixnum

Contains:
- tests/unit/          : Unit tests for individual modules
"""
