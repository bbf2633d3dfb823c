"""Errors raised by the album data-access layer."""

from typing import Any, Optional


class AlbumDaoError(Exception):
    """
    A failed repository operation, tagged with the operation name and the key
    it was called with. The driver exception, if any, is chained as `__cause__`.
    """

    def __init__(self, operation: str, key: Optional[Any], message: str):
        self.operation = operation
        self.key = key
        self.message = message
        if key is None:
            super().__init__(f"{operation}: {message}")
        else:
            super().__init__(f"{operation} {key!r}: {message}")


class AlbumNotFoundError(AlbumDaoError):
    """Raised when a lookup by id matches no row."""

    def __init__(self, operation: str, album_id: int):
        super().__init__(operation, album_id, "no such album")
