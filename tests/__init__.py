"""Test suite for domain_pubsub.

Test structure follows the test pyramid:
- unit/: Unit tests - Test each component in isolation with mocked logger
- integration/: Integration tests - Emit through the PubSub facade end to end
"""
