"""Exceptions raised by the ratio and matching core."""


class FaceMatchError(Exception):
    """Base exception for face matching errors."""
    pass

class InvalidInputError(FaceMatchError, ValueError):
    """Exception raised when a vector has the wrong length."""
    pass

class NotFoundError(FaceMatchError, LookupError):
    """Exception raised when no dataset entry can be matched."""
    pass
