import logging
import unittest
from collections.abc import Mapping

from audits.audit import Audit
from audits.bf_cache import BFCacheAudit
from audits.config import RunnerConfig
from audits.contracts import AuditMeta, AuditProduct, BFCacheFailure
from audits.observability import Observability
from audits.runner import AuditRunner, default_audits


class FakeLogger:
    def __init__(self) -> None:
        self.calls: list[dict[str, object]] = []

    def log(self, level: int, message: str, fields: Mapping[str, object]) -> None:
        self.calls.append({"level": level, "message": message, "fields": dict(fields)})

    def is_enabled_for(self, level: int) -> bool:
        return True


class ExplodingAudit(Audit):
    _META = AuditMeta(
        id="exploding",
        title="Exploding",
        failure_title="Exploding failed",
        description="Always raises.",
        supported_modes=("navigation",),
        required_artifacts=(),
    )

    @property
    def meta(self) -> AuditMeta:
        return self._META

    def audit(self, artifacts: Mapping[str, object]) -> AuditProduct:
        raise RuntimeError("boom")


def _failures(**tree: object) -> dict[str, object]:
    full_tree = {"PageSupportNeeded": {}, "Circumstantial": {}, "SupportPending": {}}
    full_tree.update(tree)  # type: ignore[arg-type]
    return {"BFCacheFailures": [BFCacheFailure(not_restored_reasons_tree=full_tree)]}  # type: ignore[arg-type]


class TestAuditRunner(unittest.TestCase):
    def _runner(self, *, mode: str = "navigation", audits=None, logger=None) -> AuditRunner:
        audit_list = audits if audits is not None else default_audits()
        return AuditRunner(
            audit_list,
            config=RunnerConfig(mode=mode, audits=[audit.id for audit in audit_list]),
            observability=Observability(logger=logger or FakeLogger()),
        )

    def test_failing_result_uses_failure_title(self) -> None:
        results = self._runner().run(_failures(PageSupportNeeded={"WebSocket": []}))

        result = results["bf-cache"]
        self.assertEqual(result.score, 0)
        self.assertEqual(result.score_display_mode, "binary")
        self.assertEqual(result.title, "Back/forward failed with actionable reasons")
        self.assertEqual(result.display_value, "1 actionable failure reason")

    def test_passing_result_uses_title(self) -> None:
        results = self._runner().run({"BFCacheFailures": []})

        result = results["bf-cache"]
        self.assertEqual(result.score, 1)
        self.assertEqual(result.title, "Back/forward cache did not fail with actionable reasons")
        self.assertIsNone(result.details)

    def test_missing_artifact_is_error_result(self) -> None:
        logger = FakeLogger()
        results = self._runner(logger=logger).run({})

        result = results["bf-cache"]
        self.assertIsNone(result.score)
        self.assertEqual(result.score_display_mode, "error")
        self.assertEqual(result.error_message, "Required BFCacheFailures gatherer did not run.")
        self.assertEqual(logger.calls[-1]["message"], "audits.runner.audit_failed")
        self.assertEqual(logger.calls[-1]["level"], logging.ERROR)

    def test_unsupported_mode_is_skipped(self) -> None:
        logger = FakeLogger()
        results = self._runner(mode="snapshot", logger=logger).run({"BFCacheFailures": []})

        self.assertEqual(results, {})
        self.assertEqual(logger.calls[-1]["message"], "audits.runner.audit_skipped")

    def test_audit_exception_does_not_stop_other_audits(self) -> None:
        logger = FakeLogger()
        runner = self._runner(audits=[ExplodingAudit(), BFCacheAudit()], logger=logger)

        results = runner.run({"BFCacheFailures": []})

        self.assertEqual(list(results), ["exploding", "bf-cache"])
        self.assertEqual(results["exploding"].score_display_mode, "error")
        self.assertEqual(results["exploding"].error_message, "Audit error: RuntimeError: boom")
        self.assertEqual(results["bf-cache"].score, 1)
        failed = [call for call in logger.calls if call["message"] == "audits.runner.audit_failed"]
        self.assertEqual(failed[0]["fields"]["error_kind"], "RuntimeError")  # type: ignore[index]

    def test_unknown_configured_audit_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AuditRunner(
                default_audits(),
                config=RunnerConfig(mode="navigation", audits=["missing"]),
            )

    def test_duplicate_audits_rejected(self) -> None:
        with self.assertRaises(ValueError):
            AuditRunner(
                [BFCacheAudit(), BFCacheAudit()],
                config=RunnerConfig(mode="navigation", audits=["bf-cache"]),
            )


if __name__ == "__main__":
    unittest.main()
