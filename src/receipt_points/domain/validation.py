"""Declarative structural validation for domain entities.

Rules are attached to dataclass fields through their metadata::

    retailer: str = field(metadata=rules(Pattern(r"^[\\w\\s\\-&]+$")))

and evaluated by :func:`validate_record`, which walks the fields in their
declared order. Sequence fields are count-checked first, then every element
that is itself a dataclass is validated recursively with its own rules. When
the sequence field declares rules of its own, every element must be a
dataclass record.

A failure is reported as a single opaque ``ValidationError``; callers are
not told which field was rejected.
"""

import re
from dataclasses import dataclass, fields, is_dataclass
from typing import Any

from receipt_points.domain.errors import INVALID_SCHEMA, ValidationError

RULES_KEY = "rules"


@dataclass(frozen=True)
class Pattern:
    """The field's string value must fully match ``regex`` (ASCII classes)."""

    regex: str

    def check(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return re.fullmatch(self.regex, value, re.ASCII) is not None


@dataclass(frozen=True)
class MinCount:
    """The field's sequence value must contain at least ``count`` elements."""

    count: int

    def check(self, value: Any) -> bool:
        if not isinstance(value, (list, tuple)):
            return False
        return len(value) >= self.count


def rules(*declared: Pattern | MinCount) -> dict[str, tuple]:
    """Build dataclass field metadata carrying the given rules."""
    return {RULES_KEY: declared}


def validate_record(record: Any) -> None:
    """Validate a dataclass instance against its declared field rules.

    Args:
        record: Dataclass instance (e.g. a candidate Receipt)

    Raises:
        ValidationError: If any rule on any field, or on any nested
            record, is not satisfied
    """
    if not is_dataclass(record) or isinstance(record, type):
        raise ValidationError(INVALID_SCHEMA)

    for f in fields(record):
        declared = f.metadata.get(RULES_KEY, ())
        value = getattr(record, f.name)
        for rule in declared:
            if not rule.check(value):
                raise ValidationError(INVALID_SCHEMA)

        if not isinstance(value, (list, tuple)):
            continue

        for element in value:
            # Elements of a rule-bearing sequence must all be records
            if declared or (is_dataclass(element) and not isinstance(element, type)):
                validate_record(element)


def is_valid(record: Any) -> bool:
    """Return True if ``record`` passes :func:`validate_record`."""
    try:
        validate_record(record)
    except ValidationError:
        return False
    return True
