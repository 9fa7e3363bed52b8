import logging
import re
from typing import Callable, Dict, List, Optional, Tuple

from regex_validators.enums import RuleCategory
from regex_validators.exceptions import UnknownRuleException, ValidationErrorsException
from regex_validators.models.validation import ValidationResult, ValidationRule
from regex_validators.settings import settings
from regex_validators.services import common, indian

logger = logging.getLogger(__name__)

Validator = Callable[[str], bool]

_REGISTERED: List[Tuple[ValidationRule, Validator]] = [
    (common.EMAIL_RULE, common.validate_email),
    (common.URL_RULE, common.validate_url),
    (common.STRONG_PASSWORD_RULE, common.validate_strong_password),
    (common.ALPHA_NUMERIC_RULE, common.validate_alpha_numeric),
    (common.ALPHA_WITH_SPACE_RULE, common.validate_alpha_with_space),
    (common.NUMERIC_RULE, common.validate_numeric),
    (
        common.ALPHA_NUMERIC_WITH_SPECIAL_CHARS_RULE,
        common._validate_alpha_numeric_with_special_chars,
    ),
    (common.ALPHA_NUMERIC_WITH_SPACE_RULE, common.validate_alpha_numeric_with_space),
    (common.ALPHABETS_RULE, common.validate_alphabets),
    (common.PHONE_NUMBER_RULE, common.validate_phone_number),
    (indian.INDIAN_MOBILE_NUMBER_RULE, indian.validate_indian_mobile_number),
    (indian.PAN_RULE, indian.validate_pan),
    (indian.AADHAR_RULE, indian.validate_aadhar),
    (indian.PIN_CODE_RULE, indian.validate_pin_code),
    (indian.GSTIN_RULE, indian.validate_gstin),
    (indian.IFSC_CODE_RULE, indian.validate_ifsc_code),
    (indian.VOTER_ID_RULE, indian.validate_voter_id),
]

_validation_rules: Dict[str, ValidationRule] = {
    rule.name: rule for rule, _ in _REGISTERED
}
_validators: Dict[str, Validator] = {rule.name: func for rule, func in _REGISTERED}

logger.debug("Registered %d validation rules", len(_validation_rules))


def is_rule_name_valid(name: str) -> bool:
    pattern = rf"^\w{{1,{settings.MAX_RULE_NAME}}}$"
    return bool(re.fullmatch(pattern, name))


def get_validation_rules(
    category: Optional[RuleCategory] = None, include_internal: bool = False
) -> List[ValidationRule]:
    return [
        rule
        for rule in _validation_rules.values()
        if (include_internal or rule.public)
        and (category is None or rule.category == category)
    ]


def get_validation_rule(name: str) -> Optional[ValidationRule]:
    return _validation_rules.get(name)


def get_validator(name: str) -> Optional[Validator]:
    return _validators.get(name)


def validate_value(rule: ValidationRule, value: str) -> Optional[str]:
    if rule.matches(value):
        return None

    if rule.error_message:
        return rule.error_message

    return f"Invalid value for rule '{rule.name}'"


def check(name: str, value: str) -> ValidationResult:
    rule = get_validation_rule(name)
    if rule is None:
        logger.debug("Lookup of unknown validation rule '%s'", name)
        raise UnknownRuleException(name)

    error = validate_value(rule, value)
    return ValidationResult(is_valid=error is None, error=error)


def validate_values(values: Dict[str, str]) -> None:
    """Validate ``rule name -> value`` pairs.

    Raises ValidationErrorsException mapping every failing rule name to its
    error. Unknown rule names are reported there as well.
    """
    errors: Dict[str, str] = {}

    for name, value in values.items():
        rule = get_validation_rule(name)
        if rule is None:
            errors[name] = f"Unknown validation rule: '{name}'"
            continue

        error = validate_value(rule, value)
        if error:
            errors[name] = error

    if errors:
        logger.debug("Validation failed for rules: %s", ", ".join(errors))
        raise ValidationErrorsException(errors)
