"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ApplicantValidationError(DomainException):
    """Applicant data broke a field or business rule; carries the error code to return"""

    def __init__(self, code: str):
        super().__init__(code)
        self.code = code


class DocumentRejectedError(DomainException):
    """License upload failed document verification"""

    pass


class PriceLookupError(DomainException):
    """Stock price could not be fetched or parsed"""

    pass


class UnmappedFieldError(DomainException):
    """Violation on a field with no entry in the error code table"""

    pass
