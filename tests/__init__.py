"""
Test suite for the spreadsheet math core

Contains:
- tests/unit/          : Unit tests for individual modules
"""
