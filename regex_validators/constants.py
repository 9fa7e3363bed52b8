import re

# Letter and digit classes are spelled out: \d and \w match non-ASCII
# characters in Python. All patterns are applied with re.fullmatch.

EMAIL_REGEX = r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,4}"

URL_SAFE_CHARS = r"[a-z0-9\-_.~!$&'()*+,;=]"
URL_REGEX = (
    r"(?:https?://)?"
    r"(?:[a-z0-9-]+\.)+"
    r"[a-z]{2,4}"
    rf"(?:/{URL_SAFE_CHARS}*)*"
    rf"(?:\?{URL_SAFE_CHARS}*)?"
)
# re.ASCII keeps IGNORECASE from folding U+017F and U+212A into [a-z]
URL_FLAGS = re.IGNORECASE | re.ASCII

STRONG_PASSWORD_REGEX = (
    r"(?=.*[a-z])"
    r"(?=.*[A-Z])"
    r"(?=.*[0-9])"
    r"(?=.*[@$!%*?&])"
    r"[A-Za-z0-9@$!%*?&]{8,}"
)

# ASCII whitespace, the Unicode space separators, U+2028, U+2029 and the BOM.
# Python's \s differs: it also matches \x1c-\x1f and \x85 but not \ufeff.
WHITESPACE = (
    r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a"
    r"\u2028\u2029\u202f\u205f\u3000\ufeff"
)

ALPHA_NUMERIC_REGEX = r"[A-Za-z0-9]+"
ALPHA_WITH_SPACE_REGEX = rf"[A-Za-z{WHITESPACE}]+"
NUMERIC_REGEX = r"[0-9]+"
ALPHA_NUMERIC_WITH_SPECIAL_CHARS_REGEX = rf"[A-Za-z0-9{WHITESPACE}\-_.]+"
ALPHA_NUMERIC_WITH_SPACE_REGEX = rf"[A-Za-z0-9{WHITESPACE}]+"
ALPHABETS_REGEX = r"[A-Za-z]+"
PHONE_NUMBER_REGEX = r"\+?[0-9]{1,4}(?:[ -]?[0-9]{1,4}){1,3}"

INDIAN_MOBILE_NUMBER_REGEX = r"[7-9][0-9]{9}"
PAN_REGEX = r"[A-Z]{5}[0-9]{4}[A-Z]"
AADHAR_REGEX = r"[2-9][0-9]{11}"
PIN_CODE_REGEX = r"[1-9][0-9]{5}"
GSTIN_REGEX = r"[0-9]{2}[A-Z]{5}[0-9]{4}[A-Z][A-Z0-9][A-Z][0-9]"
IFSC_CODE_REGEX = r"[A-Za-z]{4}[0-9]{7}"
VOTER_ID_REGEX = r"[A-Z]{3}[0-9]{7}[A-Z]"
