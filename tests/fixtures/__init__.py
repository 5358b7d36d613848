"""
Test Fixtures - Shared Test Configurations.

This package contains reusable test fixtures:
    - sample_config.yaml: Logging backend configuration
"""
