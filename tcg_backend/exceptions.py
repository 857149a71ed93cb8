from typing import Optional


class PersistenceError(Exception):
    """Raised by the persistence layer when the database operation fails."""

    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception


class DeckError(Exception):
    """Base exception for failures reported by the deck workflow."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(DeckError):
    """Missing or non-string deck name, or wrong number of cards."""

    status_code = 400


class InvalidIdError(DeckError):
    """Deck id is not an integer."""

    status_code = 400


class DeckNotFoundError(DeckError):
    """The deck does not exist or belongs to another user."""

    status_code = 404


class InternalError(DeckError):
    """Storage failure; the caller only sees a generic message."""

    status_code = 500
