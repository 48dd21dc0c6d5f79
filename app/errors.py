"""Custom domain exceptions for the application."""

# Short category labels used in error bodies.
BAD_REQUEST = "Bad Request"
NOT_FOUND = "Not Found"
INTERNAL_SERVER_ERROR = "Internal Server Error"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class DomainValidationError(DomainError):
    """Raised when business rules or domain validation fail (e.g. negative age, blank name, missing owner field)."""

    pass


class InvalidPetAgeError(DomainValidationError):
    """Raised when a pet is older than the maximum insurable age."""

    def __init__(self, max_age: int):
        self.max_age = max_age
        super().__init__(f"Pets older than {max_age} years cannot be insured")


class QuotationNotFoundError(NotFoundError):
    def __init__(self, quotation_id: str):
        self.quotation_id = quotation_id
        super().__init__(f"Quotation not found with ID: {quotation_id}")


class QuotationExpiredError(DomainError):
    """Raised when a policy is requested against a quotation past its expiry date."""

    def __init__(self, quotation_id: str):
        self.quotation_id = quotation_id
        super().__init__(f"Quotation has expired with ID: {quotation_id}")


class PolicyNotFoundError(NotFoundError):
    def __init__(self, policy_id: str):
        self.policy_id = policy_id
        super().__init__(f"Policy not found with ID: {policy_id}")
