"""Persistence layer: ORM models, PostgreSQL operations and the Redis cache."""
