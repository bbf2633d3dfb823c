"""
The `config` package provides the two core building blocks for establishing database connections.

Contents:
    - config: Configuration layer - strongly typed settings loaded from environment variables (with .env support), exposed through a cached `get_settings()`
    - connection_engine: Database layer - SQLAlchemy bootstrap that creates and pings the Engine from those settings, plus the shared MetaData and the declarative base for ORM models
"""
