#!/usr/bin/env python3
"""
CRONLINT CONFIG
---------------
Loads lint options from a YAML file. Both a flat mapping and the
plugin-style form nested under a `cron_lint` key are accepted:

    cron_lint:
      build_dir: ./
      files:
        - crontab
      check_month: false

Author: CronLint Team
Date: 2026-10-17
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Optional

from ruamel.yaml import YAML, YAMLError

logger = logging.getLogger("cronlint.config")

CONFIG_NAMES = (".cronlint.yml", ".cronlint.yaml")
SECTION_KEY = "cron_lint"


class ConfigError(RuntimeError):
    """Raised when a config file is missing, unparseable, or mistyped."""


@dataclass
class LintConfig:
    files: List[str] = field(default_factory=list)
    build_dir: str = ""
    check_month: bool = False


def find_config(directory: str = ".") -> Optional[Path]:
    """Returns the first known config file in `directory`, if any."""
    for name in CONFIG_NAMES:
        candidate = Path(directory) / name
        if candidate.is_file():
            return candidate
    return None


def load_config(path: str) -> LintConfig:
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Unable to read config {config_path}: {str(e)}")

    yaml = YAML(typ="safe")
    try:
        data = yaml.load(text)
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {str(e)}")

    logger.debug(f"Loaded config from {config_path}")
    return parse_config(data, source=str(config_path))


def parse_config(data: Any, source: str = "<config>") -> LintConfig:
    """Builds a LintConfig from already-parsed YAML data."""
    if data is None:
        return LintConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{source}: top level must be a mapping")

    if SECTION_KEY in data:
        data = data[SECTION_KEY] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"{source}: '{SECTION_KEY}' must be a mapping")

    files = data.get("files", [])
    if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
        raise ConfigError(f"{source}: 'files' must be a list of strings")

    build_dir = data.get("build_dir", "")
    if not isinstance(build_dir, str):
        raise ConfigError(f"{source}: 'build_dir' must be a string")

    check_month = data.get("check_month", False)
    if not isinstance(check_month, bool):
        raise ConfigError(f"{source}: 'check_month' must be true or false")

    unknown = set(data) - {"files", "build_dir", "check_month"}
    if unknown:
        logger.warning(f"{source}: ignoring unknown option(s): {', '.join(sorted(unknown))}")

    return LintConfig(files=list(files), build_dir=build_dir, check_month=check_month)
