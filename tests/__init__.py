"""
Test suite for bigint

Contains:
- tests/unit/          : Unit tests for individual modules and property tests
"""
