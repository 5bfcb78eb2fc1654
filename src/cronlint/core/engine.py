#!/usr/bin/env python3
"""
CRONLINT ENGINE - The Orchestrator
----------------------------------
The CronLintEngine walks a list of crontab files relative to a build
directory, validates every line, and collects the findings into a single
ValidationResult. One bad file never aborts the run.

Author: CronLint Team
Date: 2026-10-17
"""

import os
import logging
from typing import Dict, Any, List, Optional

from cronlint.core.models import (
    CronLine, Diagnostic, IssueKind, Severity, ValidationResult
)
from cronlint.validator.line import check_line

logger = logging.getLogger("cronlint.engine")


class CronLintEngine:
    """
    Principal orchestrator for crontab validation.
    Holds only its options; every call to execute() starts from scratch.
    """

    def __init__(self, check_month: bool = False, encoding: str = "utf-8"):
        """
        Args:
            check_month: Also validate the month column (off by default).
            encoding: Text encoding used to read crontab files.
        """
        self.check_month = check_month
        self.encoding = encoding

    def validate_file(self, path: str) -> bool:
        """Existence check only; the file is not opened."""
        return os.path.exists(path)

    def execute(self, files: List[str], build_dir: str) -> ValidationResult:
        """
        Lints each file in input order.

        Paths are `build_dir + file_name` verbatim, so `build_dir` normally
        carries its own trailing separator.
        """
        result = ValidationResult()
        if not files:
            return result

        for file_name in files:
            cron_file = f"{build_dir}{file_name}"
            if not self.validate_file(cron_file):
                logger.debug(f"Cron file not found: {cron_file}")
                result.add(self._missing_file(file_name))
                continue

            content = self._read(cron_file)
            if content is None:
                result.add(self._missing_file(file_name))
                continue

            result.extend(self.lint_text(content, file_name))

        logger.info(
            f"Linted {len(files)} file(s): "
            f"{len(result.high)} error(s), {len(result.normal)} warning(s)"
        )
        return result

    def lint_text(self, content: str, file_name: str) -> List[Diagnostic]:
        """Validates crontab text, splitting strictly on '\\n'."""
        diagnostics = []
        for line_no, text in enumerate(content.split("\n"), 1):
            line = CronLine(text=text, line_no=line_no, source_file=file_name)
            if line.is_skippable:
                continue
            for issue in check_line(line.text, check_month=self.check_month):
                diagnostics.append(Diagnostic(
                    severity=Severity.HIGH,
                    message=issue.message,
                    file=line.source_file,
                    line=line.line_no,
                    kind=issue.kind,
                ))
        return diagnostics

    def generate_summary(self, result: ValidationResult,
                         files: Optional[List[str]] = None) -> Dict[str, Any]:
        """Counts for the end-of-run report."""
        files = files or []
        failing = {d.file for d in result.high}
        missing = {d.file for d in result.normal if d.kind is IssueKind.MISSING_FILE}
        return {
            "total_files": len(files),
            "files_with_errors": len(failing),
            "missing_files": len(missing),
            "clean_files": len([f for f in files if f not in failing and f not in missing]),
            "errors": len(result.high),
            "warnings": len(result.normal),
            "success": result.success,
        }

    def _read(self, path: str) -> Optional[str]:
        # newline="" keeps '\r' in place so CRLF files are checked as written
        try:
            with open(path, "r", encoding=self.encoding, newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Unable to read {path}: {str(e)}")
            return None

    def _missing_file(self, file_name: str) -> Diagnostic:
        return Diagnostic(
            severity=Severity.NORMAL,
            message=f"Missing Cron File: {file_name}",
            file=file_name,
            line=None,
            kind=IssueKind.MISSING_FILE,
        )


def validate(files: List[str], build_dir: str, check_month: bool = False) -> ValidationResult:
    """Library entry point: lint `files` under `build_dir`."""
    return CronLintEngine(check_month=check_month).execute(files, build_dir)
