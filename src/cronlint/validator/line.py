#!/usr/bin/env python3
"""
CRONLINT LINE VALIDATOR
-----------------------
Splits a raw crontab line into its five schedule fields and the trailing
command, then hands each field to the grammar inspector.

Author: CronLint Team
Date: 2026-10-17
"""

import re
from typing import List

from cronlint.core.models import (
    CronField, FieldKind, IssueKind, LineIssue, SCHEDULE_FIELDS, is_skippable
)
from cronlint.validator.fields import check_field

# A command starting with '*' means a schedule field spilled over
CMD_OVERFLOW_PATTERN = re.compile(r'^\*$', re.ASCII)


def split_line(text: str) -> List[str]:
    """
    Tokenizes a line on spaces and tabs only.
    Other whitespace such as a trailing '\\r' stays part of its token.
    """
    return [token for token in text.replace("\t", " ").split(" ") if token]


def check_line(text: str, check_month: bool = False) -> List[LineIssue]:
    """
    Validates one crontab line and returns its issues in reporting order.

    Month values are only inspected when `check_month` is set.
    """
    if is_skippable(text):
        return []

    args = split_line(text)
    if len(args) < len(SCHEDULE_FIELDS):
        return [LineIssue(
            kind=IssueKind.MALFORMED_LINE,
            message=f"Line has insufficient fields: expected {len(SCHEDULE_FIELDS)}, found {len(args)}",
        )]

    fields = [CronField(kind=kind, raw_value=value) for kind, value in zip(SCHEDULE_FIELDS, args)]
    cmd = " ".join(args[len(SCHEDULE_FIELDS):])

    issues = []
    for cron_field in fields:
        if cron_field.kind is FieldKind.MONTH and not check_month:
            continue
        issues.extend(check_field(cron_field))

    if cmd and CMD_OVERFLOW_PATTERN.match(cmd[0]):
        issues.append(LineIssue(
            kind=IssueKind.MALFORMED_COMMAND,
            message=f"Cmd starts with invalid character: {cmd}",
        ))

    return issues


def validate_line(text: str, check_month: bool = False) -> List[str]:
    """Returns the error messages for one line; an empty list means valid."""
    return [issue.message for issue in check_line(text, check_month=check_month)]
