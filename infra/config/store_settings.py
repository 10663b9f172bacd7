from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

DB_PATH_ENV = "KEYED_DEFAULTS_DB_PATH"
SUITE_ENV = "KEYED_DEFAULTS_SUITE"

_DEFAULT_DB_PATH = "keyed_defaults.db"
_DEFAULT_SUITE = "standard"


@dataclass(frozen=True)
class StoreSettings:
    """Location of the process-wide store: database file plus suite name."""

    db_path: str = _DEFAULT_DB_PATH
    suite: str = _DEFAULT_SUITE

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not self.suite.strip():
            errors.append(f"{SUITE_ENV} must not be empty.")
        if self.db_path != ":memory:":
            parent = Path(self.db_path).expanduser().parent
            if not parent.is_dir():
                errors.append(f"Directory for {DB_PATH_ENV} does not exist: {parent}")
        return errors


def load_store_settings(environ: Mapping[str, str] | None = None) -> StoreSettings:
    """Build settings from environment variables, falling back to defaults.

    Every call re-reads the mapping so tests can pass their own.
    """
    env = os.environ if environ is None else environ
    db_path = env.get(DB_PATH_ENV) or _DEFAULT_DB_PATH
    if db_path != ":memory:":
        db_path = str(Path(db_path).expanduser())
    return StoreSettings(db_path=db_path, suite=env.get(SUITE_ENV, _DEFAULT_SUITE))
