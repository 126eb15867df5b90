"""Infrastructure layer - Adapters for domain protocols (ports).

Structure:
- persistence/: SQLAlchemy models, Database and repositories
- events/: In-memory event dispatcher and console log handlers
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
