"""PostgreSQL module for database operations."""

from src.data.postgres.connection import PostgresConnection, db_connection

__all__ = ["PostgresConnection", "db_connection"]
