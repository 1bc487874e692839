from __future__ import annotations

import importlib
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from audits.config.schema import RunnerConfig, validate_config

_ROOT_KEYS = {"mode", "audits"}


def load_default_config() -> RunnerConfig:
    text = (
        resources.files("audits.config")
        .joinpath("default.yaml")
        .read_text(encoding="utf-8")
    )
    return _config_from_text(text, "audits default config")


def load_config(path: Path) -> RunnerConfig:
    return _config_from_text(path.read_text(encoding="utf-8"), f"audits config {path}")


def _config_from_text(text: str, label: str) -> RunnerConfig:
    yaml = importlib.import_module("yaml")
    data = yaml.safe_load(text)
    if not isinstance(data, Mapping):
        raise ValueError(f"{label} must be a mapping")
    config = _parse_config(data)
    validate_config(config)
    return config


def _parse_config(payload: Mapping[str, object]) -> RunnerConfig:
    _reject_unknown(payload, _ROOT_KEYS, "audits config")
    mode = payload.get("mode")
    audits = payload.get("audits")
    if not isinstance(mode, str):
        raise ValueError("mode must be a string")
    if not isinstance(audits, list):
        raise ValueError("audits must be a list")
    for audit_id in audits:
        if not isinstance(audit_id, str):
            raise ValueError("audits entries must be strings")
    return RunnerConfig(mode=mode, audits=audits)


def _reject_unknown(payload: Mapping[str, object], allowed: set[str], label: str) -> None:
    unknown = set(payload.keys()) - allowed
    if unknown:
        unknown_list = ", ".join(sorted(str(item) for item in unknown))
        raise ValueError(f"unknown {label} keys: {unknown_list}")
