"""Option validation.

Commands describe their constraints declaratively: a list of option sets
(exactly one option of each set must be given) followed by an ordered list of
rules. ``validate_options`` walks them in that order and stops at the first
failure, returning its message. ``True`` means the option set is valid.
"""

import json
import re
from typing import Iterable, Sequence

GUID_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE
)
_LEADING_INT_RE = re.compile(r"^\s*[+-]?\d+")


def is_set(options: dict, name: str) -> bool:
    value = options.get(name)
    return value is not None and value is not False and value != ""


def is_valid_guid(value) -> bool:
    return isinstance(value, str) and GUID_RE.match(value) is not None


def parse_int(value):
    """Parse leading digits the way the service clients do; None if there are none."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT_RE.match(str(value))
    if match is None:
        return None
    return int(match.group(0))


class Rule:
    def check(self, options: dict):
        """Return True when the rule holds, otherwise the failure message."""
        raise NotImplementedError


class RequireOneOf(Rule):
    def __init__(self, trigger: str, names: Sequence[str]):
        self.trigger = trigger
        self.names = tuple(names)

    def check(self, options):
        if is_set(options, self.trigger) and not any(is_set(options, n) for n in self.names):
            return f"Specify either {' or '.join(self.names)} when using {self.trigger}"
        return True


class NotBoth(Rule):
    def __init__(self, trigger: str, names: Sequence[str]):
        self.trigger = trigger
        self.names = tuple(names)

    def check(self, options):
        if is_set(options, self.trigger) and sum(is_set(options, n) for n in self.names) > 1:
            return f"Specify either {' or '.join(self.names)} when using {self.trigger} but not both"
        return True


class IsGuid(Rule):
    def __init__(self, name: str, required: bool = False):
        self.name = name
        self.required = required

    def check(self, options):
        if (self.required or is_set(options, self.name)) and not is_valid_guid(options.get(self.name)):
            return f"{options.get(self.name)} is not a valid GUID"
        return True


class IsInteger(Rule):
    def __init__(self, name: str):
        self.name = name

    def check(self, options):
        if is_set(options, self.name) and parse_int(options[self.name]) is None:
            return f"{options[self.name]} is not a number"
        return True


class IsJson(Rule):
    def __init__(self, name: str):
        self.name = name

    def check(self, options):
        if is_set(options, self.name):
            try:
                json.loads(options[self.name])
            except ValueError as e:
                return f"Specified {self.name} value is not a valid JSON string. Error: {e}"
        return True


def check_option_sets(options: dict, option_sets: Iterable[Sequence[str]]):
    for option_set in option_sets:
        given = [name for name in option_set if is_set(options, name)]
        if not given:
            return f"Specify one of the following options: {', '.join(option_set)}."
        if len(given) > 1:
            return f"Specify one of the following options: {', '.join(option_set)}, but not multiple."
    return True


def validate_options(options: dict, option_sets=(), rules=()):
    result = check_option_sets(options, option_sets)
    if result is not True:
        return result
    for rule in rules:
        result = rule.check(options)
        if result is not True:
            return result
    return True
