from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Literal

FAILURE_TYPE_PAGE_SUPPORT_NEEDED = "PageSupportNeeded"
FAILURE_TYPE_CIRCUMSTANTIAL = "Circumstantial"
FAILURE_TYPE_SUPPORT_PENDING = "SupportPending"
FailureType = Literal["PageSupportNeeded", "Circumstantial", "SupportPending"]
FAILURE_TYPES: Sequence[str] = (
    FAILURE_TYPE_PAGE_SUPPORT_NEEDED,
    FAILURE_TYPE_CIRCUMSTANTIAL,
    FAILURE_TYPE_SUPPORT_PENDING,
)

GatherMode = Literal["navigation", "timespan", "snapshot"]
GATHER_MODES: Sequence[str] = ("navigation", "timespan", "snapshot")

ValueType = Literal["text", "url", "numeric", "code"]

ScoreDisplayMode = Literal["binary", "error"]
SCORE_DISPLAY_MODE_BINARY = "binary"
SCORE_DISPLAY_MODE_ERROR = "error"

# reason code -> frame urls; None when the collector recorded no frames
ReasonsMap = Mapping[str, Sequence[str] | None]
NotRestoredReasonsTree = Mapping[str, ReasonsMap]


@dataclass(frozen=True)
class BFCacheFailure:
    not_restored_reasons_tree: NotRestoredReasonsTree


@dataclass(frozen=True)
class AuditMeta:
    id: str
    title: str
    failure_title: str
    description: str
    supported_modes: Sequence[GatherMode]
    required_artifacts: Sequence[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "supported_modes", tuple(self.supported_modes))
        object.__setattr__(self, "required_artifacts", tuple(self.required_artifacts))


@dataclass(frozen=True)
class SubItemsHeading:
    key: str
    value_type: ValueType


@dataclass(frozen=True)
class TableHeading:
    key: str
    value_type: ValueType
    label: str
    sub_items_heading: SubItemsHeading | None = None


@dataclass(frozen=True)
class SubItems:
    items: Sequence[Mapping[str, object]]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class TableItem:
    values: Mapping[str, object]
    sub_items: SubItems | None = None


@dataclass(frozen=True)
class TableDetails:
    headings: Sequence[TableHeading]
    items: Sequence[TableItem]

    def __post_init__(self) -> None:
        object.__setattr__(self, "headings", tuple(self.headings))
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True)
class AuditProduct:
    score: float
    display_value: str | None = None
    details: TableDetails | None = None


@dataclass(frozen=True)
class AuditResult:
    id: str
    title: str
    description: str
    score: float | None
    score_display_mode: ScoreDisplayMode
    display_value: str | None = None
    details: TableDetails | None = None
    error_message: str | None = None
