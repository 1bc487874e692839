from __future__ import annotations

import argparse
import logging
from dataclasses import replace
from pathlib import Path

from audits.artifacts import load_artifacts
from audits.config import validate_config
from audits.config.loader import load_config, load_default_config
from audits.contracts import GATHER_MODES
from audits.observability import Observability, StdlibLogger, set_observability
from audits.runner import AuditRunner, default_audits
from audits.serialization import serialize_results


class _FieldsFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "fields"):
            record.fields = {}
        return True


def _setup_logging(level: str) -> None:
    handler = logging.StreamHandler()
    handler.addFilter(_FieldsFilter())
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s | %(fields)s")
    )
    logging.basicConfig(level=level, handlers=[handler])


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run page audits over gathered artifacts.")
    parser.add_argument(
        "--artifacts",
        type=Path,
        required=True,
        help="JSON file containing gathered artifacts.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Optional YAML runner config (default: bundled default.yaml).",
    )
    parser.add_argument(
        "--mode",
        choices=list(GATHER_MODES),
        default=None,
        help="Override the configured gather mode.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level for diagnostics written to stderr.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    _setup_logging(args.log_level)
    set_observability(Observability(logger=StdlibLogger(logging.getLogger("audits"))))

    config = load_config(args.config) if args.config is not None else load_default_config()
    if args.mode is not None:
        config = replace(config, mode=args.mode)
        validate_config(config)

    runner = AuditRunner(default_audits(), config=config)
    results = runner.run(load_artifacts(args.artifacts))
    print(serialize_results(results))


if __name__ == "__main__":
    main()
