"""
The `database` package is responsible for all interactions with the recordings database.
It provides configuration, the entity definition, the album repository, and session helpers.

Contents:
    - config:
        Settings and the engine bootstrap (connection URL, ping, shared metadata).

    - entities:
        SQLAlchemy entity models representing the database tables.

    - daos:
        The album repository interface and its relational implementation.

    - helpers:
        Session scoping and transaction helpers.

    - exceptions:
        Tagged errors raised by the repository.
"""
