"""Database infrastructure: SQLAlchemy models, sessions and repositories."""
