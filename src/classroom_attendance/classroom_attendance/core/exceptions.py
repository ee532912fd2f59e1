class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a course or student does not exist."""


class BackupFormatError(DomainError):
    """Raised when an uploaded backup is not a JSON array of courses."""


class RosterParseError(DomainError):
    """Raised when the document-parsing collaborator fails."""
