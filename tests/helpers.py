import logging
import random
from contextlib import contextmanager

from regex_validators.services.rules import get_validation_rules, get_validator

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWER = UPPER.lower()
DIGITS = "0123456789"

# Inputs no rule accepts
HOSTILE_INPUTS = [
    "",
    "\x00",
    "\x1c",
    "\x85",
    "\ud800",
    "٣٤٥",
    "ABC\x00123",
    "@" * 100_000,
    "a." * 50_000 + "!",
    "9" * 100_000 + "#",
]


def pick(rng: random.Random, alphabet: str, count: int) -> str:
    return "".join(rng.choice(alphabet) for _ in range(count))


def all_rule_names():
    return [rule.name for rule in get_validation_rules(include_internal=True)]


def validator_for(name: str):
    validator = get_validator(name)
    assert validator is not None
    return validator


@contextmanager
def bare_root_logger():
    """Strip root handlers so logging.basicConfig takes effect, then restore."""
    root = logging.getLogger()
    saved_handlers = root.handlers[:]
    saved_level = root.level

    for handler in saved_handlers:
        root.removeHandler(handler)

    try:
        yield root
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()

        for handler in saved_handlers:
            root.addHandler(handler)

        root.setLevel(saved_level)
