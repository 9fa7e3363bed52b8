"""Shape validators for Indian identifiers.

Only the character layout is checked. Checksums (GSTIN, Aadhar Verhoeff
digit) are left to callers.
"""

from regex_validators import constants
from regex_validators.enums import RuleCategory
from regex_validators.models.validation import ValidationRule

INDIAN_MOBILE_NUMBER_RULE = ValidationRule(
    name="indian_mobile_number",
    regex=constants.INDIAN_MOBILE_NUMBER_REGEX,
    category=RuleCategory.INDIA,
)
PAN_RULE = ValidationRule(
    name="pan", regex=constants.PAN_REGEX, category=RuleCategory.INDIA
)
AADHAR_RULE = ValidationRule(
    name="aadhar", regex=constants.AADHAR_REGEX, category=RuleCategory.INDIA
)
PIN_CODE_RULE = ValidationRule(
    name="pin_code", regex=constants.PIN_CODE_REGEX, category=RuleCategory.INDIA
)
GSTIN_RULE = ValidationRule(
    name="gstin", regex=constants.GSTIN_REGEX, category=RuleCategory.INDIA
)
IFSC_CODE_RULE = ValidationRule(
    name="ifsc_code", regex=constants.IFSC_CODE_REGEX, category=RuleCategory.INDIA
)
VOTER_ID_RULE = ValidationRule(
    name="voter_id", regex=constants.VOTER_ID_REGEX, category=RuleCategory.INDIA
)


def validate_indian_mobile_number(number: str) -> bool:
    """10 digits starting with 7, 8 or 9, without a country prefix."""
    return INDIAN_MOBILE_NUMBER_RULE.matches(number)


def validate_pan(pan: str) -> bool:
    """Permanent Account Number: 5 uppercase letters, 4 digits, 1 uppercase
    letter (``ABCDE1234F``). Lowercase is rejected.
    """
    return PAN_RULE.matches(pan)


def validate_aadhar(aadhar: str) -> bool:
    """12 digits, the first one between 2 and 9. No separators."""
    return AADHAR_RULE.matches(aadhar)


def validate_pin_code(pin: str) -> bool:
    return PIN_CODE_RULE.matches(pin)


def validate_gstin(gstin: str) -> bool:
    """Goods and Services Tax Identification Number, 15 characters.

    2-digit state code, the holder's PAN, an entity number (letter or digit),
    a letter (normally ``Z``) and a check digit, e.g. ``27ABCDE1234F1Z5``.
    The check digit is not verified.
    """
    return GSTIN_RULE.matches(gstin)


def validate_ifsc_code(ifsc_code: str) -> bool:
    """4 letters in either case followed by 7 digits, e.g. ``SBIN0001234``."""
    return IFSC_CODE_RULE.matches(ifsc_code)


def validate_voter_id(voter_id: str) -> bool:
    return VOTER_ID_RULE.matches(voter_id)
