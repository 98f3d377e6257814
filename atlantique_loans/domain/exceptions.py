"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Loan terms or amounts are outside the documented domain"""

    pass


class UnsupportedCurrencyError(DomainException):
    """Currency code is not one of the supported currencies"""

    def __init__(self, code: object):
        self.code = code
        super().__init__(f"Unsupported currency: {code!r}")
