#!/usr/bin/env python3
"""
CRONLINT CORE MODELS
--------------------
Defines the fundamental data structures used across the CronLint engine.
Lines and fields are short-lived views over crontab text; Diagnostics and
the ValidationResult are what callers get back.

Author: CronLint Team
Date: 2026-10-17
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FieldKind(Enum):
    """The five positional schedule fields of a cron entry."""

    MINUTE = "Minute"
    HOUR = "Hour"
    DAY_OF_MONTH = "Day of month"
    MONTH = "Month"
    DAY_OF_WEEK = "Day of week"

    @property
    def label(self) -> str:
        """Human-readable name used in error messages."""
        return self.value


# Positional order of the schedule fields on a crontab line
SCHEDULE_FIELDS = (
    FieldKind.MINUTE,
    FieldKind.HOUR,
    FieldKind.DAY_OF_MONTH,
    FieldKind.MONTH,
    FieldKind.DAY_OF_WEEK,
)


class Severity(str, Enum):
    NORMAL = "normal"
    HIGH = "high"


class IssueKind(str, Enum):
    """Error taxonomy for everything the linter can report."""

    MISSING_FILE = "missing_file"
    MALFORMED_FIELD = "malformed_field"
    MALFORMED_LINE = "malformed_line"
    MALFORMED_COMMAND = "malformed_command"


def is_skippable(text: str) -> bool:
    """Blank lines and comment lines carry no schedule."""
    return not text or text[0] == "#"


@dataclass
class CronLine:
    """
    One raw line of a crontab file.

    Built per line by the engine and discarded once its issues are collected.
    """
    text: str               # The raw line, carriage returns included
    line_no: int            # 1-based line number in the source file
    source_file: str = ""   # File name as given by the caller

    @property
    def is_skippable(self) -> bool:
        return is_skippable(self.text)


@dataclass
class CronField:
    """A single schedule field, e.g. the '1,2,5-10' minute column."""
    kind: FieldKind
    raw_value: str

    @property
    def values(self) -> List[str]:
        # The index of each sub-value is its position in this list
        return self.raw_value.split(",")


@dataclass
class LineIssue:
    """A finding on one line, before it is tagged with file and line number."""
    kind: IssueKind
    message: str


@dataclass
class Diagnostic:
    """
    A structured validation finding.

    `line` is None for file-level findings such as a missing file.
    """
    severity: Severity
    message: str
    file: str
    line: Optional[int] = None
    kind: Optional[IssueKind] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "severity": self.severity.value,
            "message": self.message,
            "file": self.file,
            "line": self.line,
            "kind": self.kind.value if self.kind else None,
        }


@dataclass
class ValidationResult:
    """Ordered diagnostics for one validation run."""
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def success(self) -> bool:
        # Only HIGH findings fail a run; a missing file is reported but tolerated
        return not any(d.severity is Severity.HIGH for d in self.diagnostics)

    @property
    def high(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.HIGH]

    @property
    def normal(self) -> List[Diagnostic]:
        return [d for d in self.diagnostics if d.severity is Severity.NORMAL]

    def add(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)

    def extend(self, diagnostics: List[Diagnostic]) -> None:
        self.diagnostics.extend(diagnostics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": self.success,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
