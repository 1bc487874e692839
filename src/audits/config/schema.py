from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from audits.contracts import GATHER_MODES


@dataclass(frozen=True)
class RunnerConfig:
    mode: str
    audits: Sequence[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "audits", tuple(self.audits))


def validate_config(config: RunnerConfig) -> None:
    if config.mode not in GATHER_MODES:
        modes = ", ".join(GATHER_MODES)
        raise ValueError(f"mode must be one of: {modes}")
    if not config.audits:
        raise ValueError("audits must not be empty")
    seen: set[str] = set()
    for audit_id in config.audits:
        if not audit_id:
            raise ValueError("audits entries must be non-empty")
        if audit_id in seen:
            raise ValueError(f"duplicate audit id: {audit_id}")
        seen.add(audit_id)
