#!/usr/bin/env python3
"""
CRONLINT ENGINE SUITE
---------------------
Exercises CronLintEngine against real files on disk:
1. Missing and unreadable files (tolerated, NORMAL severity)
2. Line-addressed errors (HIGH severity, fail the run)
3. Ordering and determinism across files
4. Literal path joining and CRLF preservation

Author: CronLint Team
Date: 2026-10-17
"""

import pytest

from cronlint.core.engine import CronLintEngine, validate
from cronlint.core.models import IssueKind, Severity


@pytest.fixture
def build_dir(tmp_path):
    return f"{tmp_path}/"


@pytest.fixture
def engine():
    return CronLintEngine()


def test_no_files_succeeds_trivially(engine, build_dir):
    result = engine.execute([], build_dir)

    assert result.success is True
    assert result.diagnostics == []


def test_missing_file_is_reported_but_tolerated(engine, build_dir):
    result = engine.execute(["crontab1"], build_dir)

    assert result.success is True
    assert len(result.diagnostics) == 1
    diag = result.diagnostics[0]
    assert diag.severity is Severity.NORMAL
    assert diag.message == "Missing Cron File: crontab1"
    assert diag.file == "crontab1"
    assert diag.line is None
    assert diag.kind is IssueKind.MISSING_FILE


def test_invalid_day_of_week_fails_with_line_number(engine, tmp_path, build_dir):
    (tmp_path / "crontab1").write_text("0 0 * * monday /bin/true\n")

    result = engine.execute(["crontab1"], build_dir)

    assert result.success is False
    assert len(result.diagnostics) == 1
    diag = result.diagnostics[0]
    assert diag.severity is Severity.HIGH
    assert diag.line == 1
    assert diag.file == "crontab1"
    assert diag.message == "Day of week[0] invalid value: monday"


def test_line_numbers_count_comments_and_blanks(engine, tmp_path, build_dir):
    (tmp_path / "crontab").write_text(
        "# nightly jobs\n"
        "\n"
        "0 2 * * * /usr/local/bin/backup\n"
        "abc 2 * * * /usr/local/bin/report\n"
    )

    result = engine.execute(["crontab"], build_dir)

    assert [(d.line, d.message) for d in result.diagnostics] == [
        (4, "Minute[0] invalid value: abc"),
    ]


def test_diagnostics_follow_file_then_line_order(engine, tmp_path, build_dir):
    (tmp_path / "a").write_text("x * * * * cmd\n* y * * * cmd\n")
    (tmp_path / "b").write_text("* * z * * cmd\n")

    result = engine.execute(["b", "missing", "a"], build_dir)

    assert [(d.file, d.line) for d in result.diagnostics] == [
        ("b", 1), ("missing", None), ("a", 1), ("a", 2),
    ]
    assert result.success is False


def test_repeated_runs_are_identical(engine, tmp_path, build_dir):
    (tmp_path / "crontab").write_text("1,2,x * * * * /bin/true\n* * * * *\n")

    first = engine.execute(["crontab", "gone"], build_dir)
    second = engine.execute(["crontab", "gone"], build_dir)

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_build_dir_is_joined_literally(engine, tmp_path):
    (tmp_path / "crontab").write_text("* * * * * /bin/true\n")

    assert engine.execute(["/crontab"], str(tmp_path)).diagnostics == []
    # Without a separator the path points elsewhere
    result = engine.execute(["crontab"], str(tmp_path))
    assert [d.kind for d in result.diagnostics] == [IssueKind.MISSING_FILE]


def test_crlf_is_not_normalized(engine, tmp_path, build_dir):
    (tmp_path / "crontab").write_bytes(b"* * * * * /bin/true\r\n* * * * *\r\n")

    result = engine.execute(["crontab"], build_dir)

    assert [(d.line, d.message) for d in result.diagnostics] == [
        (2, "Day of week[0] invalid value: *\r"),
    ]


def test_unreadable_path_is_treated_as_missing(engine, tmp_path, build_dir):
    (tmp_path / "cron.d").mkdir()
    (tmp_path / "binary").write_bytes(b"\xff\xfe\xfa\n")

    result = engine.execute(["cron.d", "binary"], build_dir)

    assert result.success is True
    assert [d.message for d in result.diagnostics] == [
        "Missing Cron File: cron.d",
        "Missing Cron File: binary",
    ]
    assert all(d.severity is Severity.NORMAL for d in result.diagnostics)


def test_validate_file_only_checks_existence(engine, tmp_path):
    (tmp_path / "crontab").write_text("garbage\n")

    assert engine.validate_file(str(tmp_path / "crontab")) is True
    assert engine.validate_file(str(tmp_path / "nope")) is False


def test_month_check_can_be_enabled(tmp_path, build_dir):
    (tmp_path / "crontab").write_text("0 0 1 jan * /bin/true\n")

    assert validate(["crontab"], build_dir).success is True
    result = validate(["crontab"], build_dir, check_month=True)
    assert [d.message for d in result.diagnostics] == ["Month[0] invalid value: jan"]


def test_summary_counts(engine, tmp_path, build_dir):
    (tmp_path / "good").write_text("* * * * * /bin/true\n")
    (tmp_path / "bad").write_text("x * * * * cmd\ny * * * * cmd\n")
    files = ["good", "bad", "gone"]

    summary = engine.generate_summary(engine.execute(files, build_dir), files)

    assert summary == {
        "total_files": 3,
        "files_with_errors": 1,
        "missing_files": 1,
        "clean_files": 1,
        "errors": 2,
        "warnings": 1,
        "success": False,
    }
