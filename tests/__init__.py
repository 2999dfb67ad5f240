#!/usr/bin/env python3
"""
Test suite.

    # Run all tests
    python -m pytest tests/ -v

    # Skip the SQLite-backed storage tests
    python -m pytest tests/ -v -m "not db"
"""
