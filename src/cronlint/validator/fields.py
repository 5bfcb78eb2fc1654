#!/usr/bin/env python3
"""
CRONLINT FIELD GRAMMAR - The Inspector
--------------------------------------
Classifies single cron sub-values against the grammar of their field.
The caller splits a field on ',' first; nothing here ever sees a comma.

Author: CronLint Team
Date: 2026-10-17
"""

import re
from types import MappingProxyType
from typing import List

from cronlint.core.models import CronField, FieldKind, IssueKind, LineIssue

# Minute/hour forms: *, 5, 1-10, *-5, */5, 2/5-10, 5-10/2
_MINUTE_HOUR = re.compile(
    r'^(?:\*|\d+|(?:\*|\d+)-\d+|\*/\d+|\d+/\d+-\d+|\d+-\d+/\d+)$', re.IGNORECASE | re.ASCII
)
_STAR_OR_DIGITS = re.compile(r'^(?:\*|\d+)$', re.IGNORECASE | re.ASCII)
_DAY_OF_WEEK = re.compile(r'^(?:\*|\d+|[a-z]{3})$', re.IGNORECASE | re.ASCII)

FIELD_PATTERNS = MappingProxyType({
    FieldKind.MINUTE: _MINUTE_HOUR,
    FieldKind.HOUR: _MINUTE_HOUR,
    FieldKind.DAY_OF_MONTH: _STAR_OR_DIGITS,
    FieldKind.MONTH: _STAR_OR_DIGITS,
    FieldKind.DAY_OF_WEEK: _DAY_OF_WEEK,
})


def validate_token(kind: FieldKind, token: str) -> bool:
    """
    Returns True when `token` is a complete match for the grammar of `kind`.
    Partial matches fail; the token is never normalized.
    """
    try:
        pattern = FIELD_PATTERNS[kind]
    except KeyError:
        raise ValueError(f"Unknown field kind: {kind!r}")
    # fullmatch so a trailing newline cannot slip past '$'
    return pattern.fullmatch(token) is not None


def check_field(cron_field: CronField) -> List[LineIssue]:
    """Runs every sub-value of a field through its grammar, keeping positions."""
    issues = []
    for index, value in enumerate(cron_field.values):
        if not validate_token(cron_field.kind, value):
            issues.append(LineIssue(
                kind=IssueKind.MALFORMED_FIELD,
                message=f"{cron_field.kind.label}[{index}] invalid value: {value}",
            ))
    return issues
