from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from casetable.errors import ConfigurationError


class RunConfig(BaseModel):
    """Options for one run of a TestApp.

    Attributes:
        target: ``module:attribute`` of the TestApp to run (CLI only).
        suites: Run only these suites, in registration order. Empty means all.
        case: Run only this case; requires exactly one entry in ``suites``.
        verbose: Write debug log records to stderr as well.
        debug_log: File that receives debug log records.
    """

    model_config = ConfigDict(extra="forbid")

    target: str | None = None
    suites: list[str] = []
    case: str | None = None
    verbose: bool = False
    debug_log: Path | None = None

    @field_validator("suites")
    @classmethod
    def no_duplicate_suites(cls, v: list[str]) -> list[str]:
        seen: set[str] = set()
        for name in v:
            if name in seen:
                raise ValueError(f"Suite '{name}' is listed more than once")
            seen.add(name)
        return v

    @model_validator(mode="after")
    def case_needs_single_suite(self) -> RunConfig:
        if self.case is not None and len(self.suites) != 1:
            raise ValueError("case requires exactly one suite to be selected")
        return self


def load_config(path: Path) -> RunConfig:
    """Load and validate a run config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ConfigurationError(f"{path}: expected a mapping at the top level")

    try:
        config = RunConfig(**raw)
    except ValidationError as e:
        raise ConfigurationError(f"{path}: {e}") from e

    # Resolve a relative debug log path against the config file location
    if config.debug_log is not None and not config.debug_log.is_absolute():
        config.debug_log = (config_dir / config.debug_log).resolve()

    return config
