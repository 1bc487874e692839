"""Page audits over gathered browser artifacts."""

from audits.artifacts import ArtifactError, load_artifacts, parse_artifacts, parse_bfcache_failures
from audits.audit import Audit, make_table_details
from audits.bf_cache import BFCacheAudit
from audits.contracts import (
    FAILURE_TYPES,
    AuditMeta,
    AuditProduct,
    AuditResult,
    BFCacheFailure,
    FailureType,
    TableDetails,
    TableHeading,
    TableItem,
)
from audits.i18n import MessageFormatError, format_message
from audits.observability import NullLogger, Observability, StdlibLogger, set_observability
from audits.runner import AuditRunner, default_audits
from audits.serialization import product_to_dict, result_to_dict

__all__ = [
    "ArtifactError",
    "Audit",
    "AuditMeta",
    "AuditProduct",
    "AuditResult",
    "AuditRunner",
    "BFCacheAudit",
    "BFCacheFailure",
    "FAILURE_TYPES",
    "FailureType",
    "MessageFormatError",
    "NullLogger",
    "Observability",
    "StdlibLogger",
    "TableDetails",
    "TableHeading",
    "TableItem",
    "default_audits",
    "format_message",
    "load_artifacts",
    "make_table_details",
    "parse_artifacts",
    "parse_bfcache_failures",
    "product_to_dict",
    "result_to_dict",
    "set_observability",
]
