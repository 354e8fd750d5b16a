"""
Test suite for the Elbonian ↔ Arabic converter

Contains:
- tests/unit/          : Unit tests for individual modules
"""
