"""Core cross-cutting concerns.

Configuration, Result types, error types and the dependency container.
Nothing in here depends on the domain model.
"""
