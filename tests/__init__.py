"""
Test suite for the exact decimal calculator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
