"""
Declarative validation rules.

Rules never mutate the model; ``run_validations`` returns an ordered list
of ``FieldError`` and the caller decides what to do with it.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

Condition = Callable[[Any], bool]


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field} {self.message}"


class Rule:
    message = "is invalid"

    def __init__(
        self,
        *fields: str,
        if_: Optional[Condition] = None,
        message: Optional[str] = None,
    ) -> None:
        self.fields = fields
        self.if_ = if_
        if message is not None:
            self.message = message

    def applies_to(self, model: Any) -> bool:
        return self.if_ is None or bool(self.if_(model))

    def is_valid(self, value: Any) -> bool:
        raise NotImplementedError

    def error_message(self, value: Any) -> str:
        return self.message

    def check(self, model: Any) -> List[FieldError]:
        if not self.applies_to(model):
            return []
        errors = []
        for name in self.fields:
            value = getattr(model, name, None)
            if not self.is_valid(value):
                errors.append(FieldError(name, self.error_message(value)))
        return errors


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    if isinstance(value, (list, tuple, dict)):
        return len(value) == 0
    return False


class PresenceOf(Rule):
    message = "can't be blank"

    def is_valid(self, value: Any) -> bool:
        return not is_blank(value)


class InclusionOf(Rule):
    message = "is not included in the list"

    def __init__(self, *fields: str, in_: Iterable[Any], allow_none: bool = False, **kwargs: Any) -> None:
        super().__init__(*fields, **kwargs)
        self.choices = tuple(in_)
        self.allow_none = allow_none

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return self.allow_none
        return value in self.choices


class LengthOf(Rule):
    """String length bounds; ``None`` is left to PresenceOf."""

    def __init__(
        self,
        *fields: str,
        maximum: Optional[int] = None,
        minimum: Optional[int] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*fields, **kwargs)
        self.maximum = maximum
        self.minimum = minimum

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        length = len(value)
        if self.maximum is not None and length > self.maximum:
            return False
        if self.minimum is not None and length < self.minimum:
            return False
        return True

    def error_message(self, value: Any) -> str:
        if self.maximum is not None and len(value) > self.maximum:
            return f"is too long (maximum is {self.maximum} characters)"
        return f"is too short (minimum is {self.minimum} characters)"


class FormatOf(Rule):
    def __init__(self, *fields: str, pattern: str, **kwargs: Any) -> None:
        super().__init__(*fields, **kwargs)
        self.pattern = re.compile(pattern)

    def is_valid(self, value: Any) -> bool:
        if value is None:
            return True
        return self.pattern.search(str(value)) is not None


class Custom(Rule):
    """Rule backed by a predicate over the whole model."""

    def __init__(self, field: str, predicate: Condition, message: str, **kwargs: Any) -> None:
        super().__init__(field, message=message, **kwargs)
        self.predicate = predicate

    def check(self, model: Any) -> List[FieldError]:
        if not self.applies_to(model) or self.predicate(model):
            return []
        return [FieldError(self.fields[0], self.message)]


def run_validations(model: Any, rules: Iterable[Rule]) -> List[FieldError]:
    errors: List[FieldError] = []
    for rule in rules:
        errors.extend(rule.check(model))
    return errors
