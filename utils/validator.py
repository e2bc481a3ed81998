"""Rule-based validation for the member registration form.

Rules are plain descriptors evaluated in order against a read-only snapshot
of the whole submission, so cross-field rules can look at sibling fields.
The result is an error map: ``{field: {code: message}}``; empty means valid.
"""

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Mapping

from email_validator import EmailNotValidError, validate_email

from ..constant import (
    DEFAULT_MESSAGES,
    EMAIL_MAX_LENGTH,
    HOBBY_FIELDS,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
    PROFILE_MAX_LENGTH,
    ErrorCode,
    FormField,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

Predicate = Callable[[Any, Mapping[str, Any]], bool]


def is_empty(value: Any) -> bool:
    """None, a missing key and the empty string all count as not submitted."""
    return value is None or value == ""


def is_integer(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, str):
        return bool(_INTEGER_RE.fullmatch(value))
    return False


def to_int(value: Any) -> int | None:
    """Coerce an integer-like value, None when it is not one."""
    if not is_integer(value):
        return None
    try:
        return int(value)
    except ValueError:
        # beyond the interpreter's integer string conversion limit
        return None


def is_blank_hobby(value: Any) -> bool:
    # 0 is treated like an unselected hobby
    return is_empty(value) or to_int(value) == 0


def is_valid_email(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


@dataclass(frozen=True)
class Rule:
    field: str
    code: str
    predicate: Predicate
    depends_on: tuple[str, ...] = ()
    # skip the predicate when the field itself was not submitted
    skip_empty: bool = True


def _required(value, data) -> bool:
    return not is_empty(value)


def _hobby_required(value, data) -> bool:
    return not is_blank_hobby(value)


def _max_length(limit: int) -> Predicate:
    return lambda value, data: len(str(value)) <= limit


def _min_length(limit: int) -> Predicate:
    return lambda value, data: len(str(value)) >= limit


def _email(value, data) -> bool:
    return is_valid_email(value)


def _integer(value, data) -> bool:
    return is_integer(value)


def _valid_hobby(catalog: Mapping[int, str]) -> Predicate:
    def predicate(value, data) -> bool:
        return to_int(value) in catalog
    return predicate


def _unique_hobby(others: tuple[str, ...]) -> Predicate:
    def predicate(value, data) -> bool:
        mine = to_int(value)
        if mine is None or mine == 0:
            return True
        for other in others:
            theirs = data.get(other)
            if is_blank_hobby(theirs):
                continue
            if to_int(theirs) == mine:
                return False
        return True
    return predicate


def build_rules(catalog: Mapping[int, str]) -> tuple[Rule, ...]:
    """Registration form rules, in evaluation order."""
    email = FormField.EMAIL.value
    password = FormField.PASSWORD.value
    rules = [
        Rule(email, ErrorCode.REQUIRED.value, _required, skip_empty=False),
        Rule(email, ErrorCode.MAX_LENGTH.value, _max_length(EMAIL_MAX_LENGTH)),
        Rule(email, ErrorCode.EMAIL.value, _email),
        Rule(password, ErrorCode.REQUIRED.value, _required, skip_empty=False),
        Rule(password, ErrorCode.MIN_LENGTH.value, _min_length(PASSWORD_MIN_LENGTH)),
        Rule(password, ErrorCode.MAX_LENGTH.value, _max_length(PASSWORD_MAX_LENGTH)),
    ]
    for field in (FormField.NAME.value, FormField.NICKNAME.value):
        rules.append(Rule(field, ErrorCode.REQUIRED.value, _required, skip_empty=False))
        rules.append(Rule(field, ErrorCode.MAX_LENGTH.value, _max_length(PROFILE_MAX_LENGTH)))

    rules.append(Rule(FormField.HOBBY1.value, ErrorCode.REQUIRED.value, _hobby_required, skip_empty=False))
    for field in HOBBY_FIELDS:
        others = tuple(f for f in HOBBY_FIELDS if f != field)
        rules.append(Rule(field, ErrorCode.NOT_INTEGER.value, _integer))
        rules.append(Rule(field, ErrorCode.IS_VALID_HOBBY.value, _valid_hobby(catalog)))
        rules.append(Rule(field, ErrorCode.IS_UNIQUE_HOBBY.value, _unique_hobby(others), depends_on=others))
    return tuple(rules)


class Validator:
    """Evaluate the registration rules against one submission."""

    def __init__(self, catalog: Mapping[int, str], messages: Mapping[str, str] | None = None):
        self.catalog = MappingProxyType(dict(catalog))
        self.messages = {**DEFAULT_MESSAGES, **(messages or {})}
        self.rules = build_rules(self.catalog)

    def message_for(self, code: str) -> str:
        return self.messages.get(code, code)

    def validate(self, data: Mapping[str, Any] | None) -> dict[str, dict[str, str]]:
        snapshot = MappingProxyType(dict(data or {}))
        errors: dict[str, dict[str, str]] = {}
        for rule in self.rules:
            value = snapshot.get(rule.field)
            if rule.skip_empty and is_empty(value):
                continue
            # predicates only see their own field and the fields they declare
            context = {f: snapshot.get(f) for f in (rule.field, *rule.depends_on)}
            if rule.predicate(value, MappingProxyType(context)):
                continue
            errors.setdefault(rule.field, {})[rule.code] = self.message_for(rule.code)
        return errors
