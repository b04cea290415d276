"""Unit test configuration.

Isolates unit tests from any integration setup.
Unit tests must not depend on a .env file or external services.
"""
