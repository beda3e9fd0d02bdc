"""Persistence: SQLAlchemy engine, ORM models, repositories and stores."""
