from typing import Dict


class UnknownRuleException(Exception):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown validation rule: '{name}'")


class ValidationErrorsException(Exception):
    def __init__(self, errors: Dict[str, str]):
        self.errors = errors
        super().__init__(errors)
