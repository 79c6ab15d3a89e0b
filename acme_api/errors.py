"""Custom domain exceptions for the application."""

from acme_api.domain.quote_rules import RuleViolation

# Stable, machine-readable error codes for API consumers.
NOT_FOUND = "NOT_FOUND"
BUSINESS_RULE_VIOLATION = "BUSINESS_RULE_VIOLATION"
VALIDATION_ERROR = "VALIDATION_ERROR"
STORAGE_FAILURE = "STORAGE_FAILURE"


class DomainError(Exception):
    """Base exception for domain/business logic errors."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist."""

    pass


class BusinessRuleViolationError(DomainError):
    """Raised at the HTTP boundary when a quote request breaks a business rule."""

    def __init__(self, violation: RuleViolation):
        super().__init__(violation.message)
        self.violation = violation
