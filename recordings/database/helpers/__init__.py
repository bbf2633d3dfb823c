"""
The `helpers` package provides utilities that support database operations.

Contents
--------
- transactionManagement
    - `session_scope` context manager: opens a session, commits on success,
      rolls back on error, always closes
"""
