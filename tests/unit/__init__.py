"""
Unit Tests - Testing Individual Components in Isolation.

Unit tests use ManualClock so every instant and duration is deterministic.

Test Files:
    - test_metric_recorder.py: Recorder state machine and durations
    - test_in_memory_sink.py: Capture sink aggregation and read-back
    - test_logging_sink.py: Structured publishing via structlog
    - test_config_loader.py: Configuration loading/validation
"""
