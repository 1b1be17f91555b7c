"""
Custom exceptions for the face-index generator.
"""


class FaceIndexError(Exception):
    """Base exception for all face-index errors."""
    
    def __init__(self, message: str, code: str = "FACE_INDEX_ERROR") -> None:
        self.message = message
        self.code = code
        super().__init__(self.message)


class InvalidReferenceError(FaceIndexError):
    """Reference string is not a usable hexadecimal seed reference."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="INVALID_REFERENCE")


class ParameterRangeError(FaceIndexError):
    """Parameter value is non-finite or outside [-1, 1]."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="PARAMETER_RANGE")


class WalkLengthError(FaceIndexError):
    """Requested walk is negative or longer than allowed."""
    
    def __init__(self, message: str) -> None:
        super().__init__(message, code="WALK_LENGTH")
