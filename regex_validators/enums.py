from enum import Enum


class RuleCategory(str, Enum):
    GENERIC = "generic"
    INDIA = "india"
