"""Custom exceptions for the record validator.

Per-field validation failures are never raised; they are reported through
the error map returned by a validation run. The exceptions below represent
setup or deployment defects and propagate to the caller unhandled.
"""


class RecordValidatorError(Exception):
    """Base class for all record validator errors."""


class ConfigurationError(RecordValidatorError):
    """Structural or setup defect (not a data problem)."""


class RuleDiscoveryError(ConfigurationError):
    """A custom rule setup entry is malformed or failed while registering.

    Raised by the locale registration step. The run that triggered the
    registration is aborted.

    Example:
        >>> raise RuleDiscoveryError("Rule setup 'my_rules' is not callable")
    """


class RuleConfigError(ConfigurationError):
    """Declarative rule file could not be parsed or failed schema checks."""


class UnknownRuleError(ConfigurationError):
    """The validation engine has no rule registered under the given name."""

    def __init__(self, rule_name: str, field: str | None = None):
        self.rule_name = rule_name
        self.field = field
        message = f"Rule '{rule_name}' has not been registered"
        if field:
            message += f" (field '{field}')"
        super().__init__(message)
