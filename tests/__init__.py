"""
Epicboard test suite.

Tests are organized by layer:
    tests/unit/         Unit tests (in-memory storage, no terminal)
    tests/integration/  Scripted sessions and CLI runs against temp files

Run all tests:
    pytest
"""
