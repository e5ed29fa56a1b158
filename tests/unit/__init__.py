"""
Unit Tests Package.

This package contains mock-based unit tests that test
individual components in isolation.

Tests use mocked baskets to verify:
- Calls delegated to the basket
- Return values set up on the double
- Notifications raised by the basket
- Error translation
"""
