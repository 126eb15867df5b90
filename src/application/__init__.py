"""Application layer - Use cases and orchestration.

Structure:
- commands/: Command dataclasses and handlers (write operations)

Handlers load aggregates through repository protocols, call domain logic,
persist the result and then publish domain events through the injected
dispatcher. The application layer contains no business rules.
"""
