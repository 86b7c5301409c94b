"""
Test Suite
==========

Test suite matching the experimentation/ package structure.

Test Categories:
- unit: Unit tests for individual components
- integration: Actions running against an in-process fake frontend
"""
