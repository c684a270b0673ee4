"""Error taxonomy for the BizTime API.

Each error carries the HTTP status the API layer answers with. Only a
missing record gets a client status; bad input and taken codes are
reported as server errors.
"""


class BizTimeError(Exception):
    """Base exception for BizTime."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BizTimeError):
    """Raised when a company or invoice lookup finds nothing."""

    status_code = 404


class ValidationError(BizTimeError):
    """Raised for malformed input or a broken reference."""

    status_code = 500


class ConflictError(BizTimeError):
    """Raised when a unique key is already taken."""

    status_code = 500
