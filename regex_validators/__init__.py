from regex_validators.enums import RuleCategory
from regex_validators.exceptions import UnknownRuleException, ValidationErrorsException
from regex_validators.models import ValidationResult, ValidationRule
from regex_validators.services.common import (
    validate_alpha_numeric,
    validate_alpha_numeric_with_space,
    validate_alpha_with_space,
    validate_alphabets,
    validate_email,
    validate_numeric,
    validate_phone_number,
    validate_strong_password,
    validate_url,
)
from regex_validators.services.indian import (
    validate_aadhar,
    validate_gstin,
    validate_ifsc_code,
    validate_indian_mobile_number,
    validate_pan,
    validate_pin_code,
    validate_voter_id,
)
from regex_validators.services.rules import (
    check,
    get_validation_rule,
    get_validation_rules,
    get_validator,
    validate_values,
)


__all__ = [
    "RuleCategory",
    "UnknownRuleException",
    "ValidationErrorsException",
    "ValidationResult",
    "ValidationRule",
    "validate_email",
    "validate_url",
    "validate_strong_password",
    "validate_alpha_numeric",
    "validate_alpha_with_space",
    "validate_numeric",
    "validate_alpha_numeric_with_space",
    "validate_alphabets",
    "validate_phone_number",
    "validate_indian_mobile_number",
    "validate_pan",
    "validate_aadhar",
    "validate_pin_code",
    "validate_gstin",
    "validate_ifsc_code",
    "validate_voter_id",
    "check",
    "get_validation_rule",
    "get_validation_rules",
    "get_validator",
    "validate_values",
]
