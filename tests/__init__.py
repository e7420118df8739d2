"""
Unit Tests for chess_ai

This package contains unit tests for all move selection components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_evaluation.py

    # Run with coverage
    pytest tests/ --cov=chess_ai --cov-report=html

    # Run specific test
    pytest tests/test_policy.py::TestEasyTier::test_only_captures_when_available

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
