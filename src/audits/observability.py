from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol


class StructuredLogger(Protocol):
    def log(self, level: int, message: str, fields: Mapping[str, object]) -> None: ...

    def is_enabled_for(self, level: int) -> bool: ...


@dataclass(frozen=True)
class StdlibLogger:
    logger: logging.Logger

    def log(self, level: int, message: str, fields: Mapping[str, object]) -> None:
        self.logger.log(level, message, extra={"fields": dict(fields)})

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)


@dataclass(frozen=True)
class NullLogger:
    def log(self, level: int, message: str, fields: Mapping[str, object]) -> None:
        return None

    def is_enabled_for(self, level: int) -> bool:
        return False


@dataclass(frozen=True)
class Observability:
    logger: StructuredLogger

    def log_bf_cache_evaluated(
        self,
        *,
        failure_count: int,
        reason_count: int,
        actionable_count: int,
        score: float,
        reasons: Mapping[str, list[str]] | None = None,
    ) -> None:
        fields: dict[str, object] = {
            "failure_count": failure_count,
            "reason_count": reason_count,
            "actionable_count": actionable_count,
            "score": score,
        }
        if reasons is not None and self.logger.is_enabled_for(logging.DEBUG):
            fields["reasons_by_type"] = {key: list(value) for key, value in reasons.items()}
        self.logger.log(logging.INFO, "audits.bf_cache.evaluated", fields)

    def log_audit_skipped(self, *, audit_id: str, mode: str) -> None:
        self.logger.log(
            logging.INFO,
            "audits.runner.audit_skipped",
            {"audit_id": audit_id, "mode": mode},
        )

    def log_audit_completed(
        self, *, audit_id: str, score: float | None, display_value: str | None
    ) -> None:
        self.logger.log(
            logging.INFO,
            "audits.runner.audit_completed",
            {"audit_id": audit_id, "score": score, "display_value": display_value},
        )

    def log_audit_failed(self, *, audit_id: str, error_kind: str, error_detail: str) -> None:
        self.logger.log(
            logging.ERROR,
            "audits.runner.audit_failed",
            {
                "audit_id": audit_id,
                "error_kind": error_kind,
                "error_detail": error_detail,
            },
        )


_OBSERVABILITY = Observability(logger=NullLogger())


def set_observability(observability: Observability) -> None:
    global _OBSERVABILITY
    _OBSERVABILITY = observability


def get_observability() -> Observability:
    return _OBSERVABILITY
