from audits.config.schema import (
    GATHER_MODES,
    RunnerConfig,
    validate_config,
)

__all__ = [
    "GATHER_MODES",
    "RunnerConfig",
    "validate_config",
]
