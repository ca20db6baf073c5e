from .exceptions import FormErrorsError, InvalidPathError

__all__ = ["FormErrorsError", "InvalidPathError"]
