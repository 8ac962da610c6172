"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RulesetLoadError(DomainException):
    """Ruleset document is unreadable or does not fit the fee rule model"""

    pass


class RulesetNotLoadedError(DomainException):
    """No ruleset is available to assess transactions against"""

    pass
