"""Unit test configuration.

Unit tests should not depend on app.py or external services: build
repositories and contexts directly in the test module.
"""
