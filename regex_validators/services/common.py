"""Validators for generic string formats."""

from regex_validators import constants
from regex_validators.enums import RuleCategory
from regex_validators.models.validation import ValidationRule

EMAIL_RULE = ValidationRule(
    name="email", regex=constants.EMAIL_REGEX, category=RuleCategory.GENERIC
)
URL_RULE = ValidationRule(
    name="url",
    regex=constants.URL_REGEX,
    flags=constants.URL_FLAGS,
    category=RuleCategory.GENERIC,
)
STRONG_PASSWORD_RULE = ValidationRule(
    name="strong_password",
    regex=constants.STRONG_PASSWORD_REGEX,
    category=RuleCategory.GENERIC,
)
ALPHA_NUMERIC_RULE = ValidationRule(
    name="alpha_numeric",
    regex=constants.ALPHA_NUMERIC_REGEX,
    category=RuleCategory.GENERIC,
)
ALPHA_WITH_SPACE_RULE = ValidationRule(
    name="alpha_with_space",
    regex=constants.ALPHA_WITH_SPACE_REGEX,
    category=RuleCategory.GENERIC,
)
NUMERIC_RULE = ValidationRule(
    name="numeric", regex=constants.NUMERIC_REGEX, category=RuleCategory.GENERIC
)
ALPHA_NUMERIC_WITH_SPECIAL_CHARS_RULE = ValidationRule(
    name="alpha_numeric_with_special_chars",
    regex=constants.ALPHA_NUMERIC_WITH_SPECIAL_CHARS_REGEX,
    category=RuleCategory.GENERIC,
    public=False,
)
ALPHA_NUMERIC_WITH_SPACE_RULE = ValidationRule(
    name="alpha_numeric_with_space",
    regex=constants.ALPHA_NUMERIC_WITH_SPACE_REGEX,
    category=RuleCategory.GENERIC,
)
ALPHABETS_RULE = ValidationRule(
    name="alphabets", regex=constants.ALPHABETS_REGEX, category=RuleCategory.GENERIC
)
PHONE_NUMBER_RULE = ValidationRule(
    name="phone_number",
    regex=constants.PHONE_NUMBER_REGEX,
    category=RuleCategory.GENERIC,
)


def validate_email(email: str) -> bool:
    """Check an email address shape: ``local@domain.tld``.

    The TLD is 2 to 4 letters. Dot placement inside the domain is not checked.

    >>> validate_email("user@example.com")
    True
    """
    return EMAIL_RULE.matches(email)


def validate_url(url: str) -> bool:
    """Check a host-style URL with an optional ``http``/``https`` scheme.

    Case-insensitive. Path segments and the query string are limited to
    unreserved and sub-delimiter characters, so ``#`` and spaces are rejected.

    >>> validate_url("https://example.com/path?x=1")
    True
    """
    return URL_RULE.matches(url)


def validate_strong_password(password: str) -> bool:
    """At least 8 characters with a lowercase letter, an uppercase letter,
    a digit and one of ``@$!%*?&``. No other characters are allowed.
    """
    return STRONG_PASSWORD_RULE.matches(password)


def validate_alpha_numeric(value: str) -> bool:
    return ALPHA_NUMERIC_RULE.matches(value)


def validate_alpha_with_space(value: str) -> bool:
    """ASCII letters and whitespace only."""
    return ALPHA_WITH_SPACE_RULE.matches(value)


def validate_numeric(value: str) -> bool:
    """ASCII digits only."""
    return NUMERIC_RULE.matches(value)


def _validate_alpha_numeric_with_special_chars(value: str) -> bool:
    # letters, digits, whitespace, "-", "_" and "."
    return ALPHA_NUMERIC_WITH_SPECIAL_CHARS_RULE.matches(value)


def validate_alpha_numeric_with_space(value: str) -> bool:
    return ALPHA_NUMERIC_WITH_SPACE_RULE.matches(value)


def validate_alphabets(value: str) -> bool:
    return ALPHABETS_RULE.matches(value)


def validate_phone_number(phone: str) -> bool:
    """Loose phone number shape check.

    An optional ``+`` followed by 2 to 4 groups of 1 to 4 digits, each group
    after the first optionally preceded by a space or hyphen. This is not a
    dialing-plan check and accepts many plain digit strings.

    >>> validate_phone_number("+1 123-456-7890")
    True
    """
    return PHONE_NUMBER_RULE.matches(phone)
