"""
Test Suite for Metric Recorder.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: End-to-end recorder lifecycle tests
    - fixtures/: Shared test configuration

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest --cov=src/metric_recorder        # With coverage
"""
