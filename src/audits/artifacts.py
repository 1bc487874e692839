from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path

from .bf_cache import BFCACHE_FAILURES_ARTIFACT
from .contracts import FAILURE_TYPES, BFCacheFailure, NotRestoredReasonsTree

_FAILURE_KEYS = {"notRestoredReasonsTree"}


class ArtifactError(ValueError):
    """Raised when gathered artifacts do not match the expected shape."""


def load_artifacts(path: Path) -> dict[str, object]:
    with path.open("r", encoding="utf-8") as handle:
        payload = json.load(handle)
    return parse_artifacts(payload)


def parse_artifacts(payload: object) -> dict[str, object]:
    if not isinstance(payload, Mapping):
        raise ArtifactError("artifacts must be a mapping")
    artifacts: dict[str, object] = {}
    for name, value in payload.items():
        if name == BFCACHE_FAILURES_ARTIFACT:
            artifacts[name] = parse_bfcache_failures(value)
        else:
            artifacts[str(name)] = value
    return artifacts


def parse_bfcache_failures(payload: object) -> Sequence[BFCacheFailure]:
    if not isinstance(payload, list):
        raise ArtifactError(f"{BFCACHE_FAILURES_ARTIFACT} must be a list")
    return tuple(
        _parse_failure(item, f"{BFCACHE_FAILURES_ARTIFACT}[{index}]")
        for index, item in enumerate(payload)
    )


def _parse_failure(payload: object, label: str) -> BFCacheFailure:
    if not isinstance(payload, Mapping):
        raise ArtifactError(f"{label} must be a mapping")
    unknown = set(payload.keys()) - _FAILURE_KEYS
    if unknown:
        unknown_list = ", ".join(sorted(str(item) for item in unknown))
        raise ArtifactError(f"unknown {label} keys: {unknown_list}")
    tree = _parse_tree(payload.get("notRestoredReasonsTree"), f"{label}.notRestoredReasonsTree")
    return BFCacheFailure(not_restored_reasons_tree=tree)


def _parse_tree(payload: object, label: str) -> NotRestoredReasonsTree:
    if not isinstance(payload, Mapping):
        raise ArtifactError(f"{label} must be a mapping")
    unknown = set(payload.keys()) - set(FAILURE_TYPES)
    if unknown:
        unknown_list = ", ".join(sorted(str(item) for item in unknown))
        raise ArtifactError(f"unknown {label} failure types: {unknown_list}")
    tree: dict[str, dict[str, Sequence[str] | None]] = {}
    for failure_type in FAILURE_TYPES:
        if failure_type not in payload:
            raise ArtifactError(f"missing {label}.{failure_type}")
        reasons = payload[failure_type]
        if not isinstance(reasons, Mapping):
            raise ArtifactError(f"{label}.{failure_type} must be a mapping")
        tree[failure_type] = {
            str(reason): _parse_frame_urls(frame_urls, f"{label}.{failure_type}.{reason}")
            for reason, frame_urls in reasons.items()
        }
    return tree


def _parse_frame_urls(payload: object, label: str) -> Sequence[str] | None:
    if payload is None:
        return None
    if not isinstance(payload, list):
        raise ArtifactError(f"{label} must be a list of frame urls")
    for frame_url in payload:
        if not isinstance(frame_url, str):
            raise ArtifactError(f"{label} frame urls must be strings")
    return tuple(payload)
