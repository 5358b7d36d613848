"""
Integration Tests - Config to Recorder.

These tests verify that configuration, registry, factories and
recorders work together around a realistic unit of work.

Test Files:
    - test_recorder_lifecycle.py: Scoped recording, failure paths, backends
"""
