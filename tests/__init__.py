"""Test suite for the ordering application.

Test structure follows the test pyramid:
- unit/: Unit tests - Domain logic, dispatcher, handlers in isolation
- integration/: Integration tests - Repositories against in-memory SQLite
"""
