"""
Test suite for the Raion configurator

Contains:
- tests/unit/          : Unit tests for individual modules
"""
