import re
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, model_validator

from regex_validators.enums import RuleCategory


class ValidationRule(BaseModel):
    """A named, fixed pattern that a whole string either matches or not."""

    model_config = ConfigDict(frozen=True)

    name: str
    regex: str
    flags: int = 0
    category: RuleCategory
    public: bool = True
    error_message: Optional[str] = None

    @model_validator(mode="after")
    def _check_regex(self) -> "ValidationRule":
        try:
            re.compile(self.regex, self.flags)
        except re.error as e:
            raise ValueError(f"Invalid regex pattern for rule '{self.name}': {e}")

        return self

    def matches(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False

        return re.fullmatch(self.regex, value, self.flags) is not None


class ValidationResult(BaseModel):
    is_valid: bool
    error: Optional[str]
