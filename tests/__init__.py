"""Test suite for RBX API Utils.

Test Structure:
- config/: Tests for configuration management
- domain/: Tests for the API index, type checker and property accessor
- infrastructure/: Tests for dump loading and logging
- utils/: Tests for utility functions
- performance/: Indexing benchmarks

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
    pytest -m "not slow"      # Skip slow tests
"""

__version__ = "0.1.0"
