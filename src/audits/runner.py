from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from .audit import Audit
from .bf_cache import BFCacheAudit
from .config import RunnerConfig
from .contracts import SCORE_DISPLAY_MODE_BINARY, SCORE_DISPLAY_MODE_ERROR, AuditResult
from .observability import Observability, get_observability


def default_audits() -> tuple[Audit, ...]:
    return (BFCacheAudit(),)


@dataclass
class AuditRunner:
    audits: dict[str, Audit]
    config: RunnerConfig
    observability: Observability

    def __init__(
        self,
        audits: Iterable[Audit],
        *,
        config: RunnerConfig,
        observability: Observability | None = None,
    ) -> None:
        self.audits = {}
        for audit in audits:
            if audit.id in self.audits:
                raise ValueError(f"duplicate audit id: {audit.id}")
            self.audits[audit.id] = audit
        for audit_id in config.audits:
            if audit_id not in self.audits:
                raise ValueError(f"unknown audit id: {audit_id}")
        self.config = config
        self.observability = observability or get_observability()

    def run(self, artifacts: Mapping[str, object]) -> dict[str, AuditResult]:
        results: dict[str, AuditResult] = {}
        for audit_id in self.config.audits:
            audit = self.audits[audit_id]
            if not audit.supports_mode(self.config.mode):
                self.observability.log_audit_skipped(audit_id=audit_id, mode=self.config.mode)
                continue
            results[audit_id] = self._run_audit(audit, artifacts)
        return results

    def _run_audit(self, audit: Audit, artifacts: Mapping[str, object]) -> AuditResult:
        missing = audit.missing_artifacts(artifacts)
        if missing:
            detail = f"Required {missing[0]} gatherer did not run."
            self.observability.log_audit_failed(
                audit_id=audit.id, error_kind="missing_artifact", error_detail=detail
            )
            return _error_result(audit, detail)

        try:
            product = audit.audit(artifacts)
        except Exception as exc:
            self.observability.log_audit_failed(
                audit_id=audit.id,
                error_kind=type(exc).__name__,
                error_detail=str(exc),
            )
            return _error_result(audit, f"Audit error: {type(exc).__name__}: {exc}")

        meta = audit.meta
        self.observability.log_audit_completed(
            audit_id=audit.id, score=product.score, display_value=product.display_value
        )
        return AuditResult(
            id=meta.id,
            title=meta.title if product.score == 1 else meta.failure_title,
            description=meta.description,
            score=product.score,
            score_display_mode=SCORE_DISPLAY_MODE_BINARY,
            display_value=product.display_value,
            details=product.details,
        )


def _error_result(audit: Audit, message: str) -> AuditResult:
    meta = audit.meta
    return AuditResult(
        id=meta.id,
        title=meta.title,
        description=meta.description,
        score=None,
        score_display_mode=SCORE_DISPLAY_MODE_ERROR,
        error_message=message,
    )
