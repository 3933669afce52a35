# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Application-level errors raised by the member service."""


class MemberError(Exception):
    """Base class for recoverable member operation failures."""

    title = "Error"


class MemberValidationError(MemberError):
    title = "Validation Errors"

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class DuplicateError(MemberError):
    title = "Duplicate Entry"

    def __init__(self, message: str = (
        "Username, email, or phone number already exists. Please use unique values."
    )):
        super().__init__(message)


class NotFoundError(MemberError):
    def __init__(self, user_id: int, message: str = "No record found with the given ID."):
        self.user_id = user_id
        super().__init__(message)
