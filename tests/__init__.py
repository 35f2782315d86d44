"""
Unit Tests for Connect Four Solver

This package contains unit tests for all solver components.

Running Tests:
    # Run all tests
    pytest tests/

    # Run specific test file
    pytest tests/test_win.py

    # Run with coverage
    pytest tests/ --cov=connect_four --cov-report=html

    # Run specific test
    pytest tests/test_search.py::TestNextMoves::test_empty_board_depth_one

Dependencies:
    - pytest: Test framework
    - pytest-cov: Coverage reporting
"""
