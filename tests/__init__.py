"""
Test suite for optvalue

Contains:
- tests/unit/          : Unit tests for individual modules
"""
