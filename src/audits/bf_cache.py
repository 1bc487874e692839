from __future__ import annotations

from collections.abc import Mapping, Sequence

from .audit import Audit, make_table_details
from .bfcache_strings import describe_reason
from .contracts import (
    FAILURE_TYPE_CIRCUMSTANTIAL,
    FAILURE_TYPE_PAGE_SUPPORT_NEEDED,
    FAILURE_TYPE_SUPPORT_PENDING,
    AuditMeta,
    AuditProduct,
    BFCacheFailure,
    SubItems,
    SubItemsHeading,
    TableHeading,
    TableItem,
)
from .i18n import create_message_fn
from .observability import get_observability

BFCACHE_FAILURES_ARTIFACT = "BFCacheFailures"

UI_STRINGS: dict[str, str] = {
    "title": "Back/forward cache did not fail with actionable reasons",
    "failure_title": "Back/forward failed with actionable reasons",
    "description": (
        "Many navigations are performed using the back/forward buttons. The back/forward "
        "cache can speed up these return navigations. "
        "[Learn more about the back/forward cache](https://web.dev/bfcache/)"
    ),
    "actionable_failure_type": "Actionable",
    "not_actionable_failure_type": "Not actionable",
    "support_pending_failure_type": "Pending browser support",
    "failure_reason_column": "Failure reason",
    "failure_type_column": "Failure type",
    "display_value": (
        "{itemCount, plural,\n"
        "    =1 {1 actionable failure reason}\n"
        "    other {# actionable failure reasons}\n"
        "    }"
    ),
}

str_ = create_message_fn(UI_STRINGS)

ORDERED_FAILURE_TYPES: Sequence[str] = (
    FAILURE_TYPE_PAGE_SUPPORT_NEEDED,
    FAILURE_TYPE_CIRCUMSTANTIAL,
    FAILURE_TYPE_SUPPORT_PENDING,
)

FAILURE_TYPE_TO_STRING: Mapping[str, str] = {
    FAILURE_TYPE_PAGE_SUPPORT_NEEDED: str_(UI_STRINGS["actionable_failure_type"]),
    FAILURE_TYPE_CIRCUMSTANTIAL: str_(UI_STRINGS["not_actionable_failure_type"]),
    FAILURE_TYPE_SUPPORT_PENDING: str_(UI_STRINGS["support_pending_failure_type"]),
}

TABLE_HEADINGS: Sequence[TableHeading] = (
    TableHeading(
        key="reason",
        value_type="text",
        label=str_(UI_STRINGS["failure_reason_column"]),
        sub_items_heading=SubItemsHeading(key="frameUrl", value_type="url"),
    ),
    TableHeading(
        key="failureType",
        value_type="text",
        label=str_(UI_STRINGS["failure_type_column"]),
    ),
)


class BFCacheAudit(Audit):
    """Flags back/forward cache restore failures the page author can fix.

    Only the first recorded failure is analyzed; later failures in the artifact
    are ignored.
    """

    _META = AuditMeta(
        id="bf-cache",
        title=str_(UI_STRINGS["title"]),
        failure_title=str_(UI_STRINGS["failure_title"]),
        description=str_(UI_STRINGS["description"]),
        supported_modes=("navigation", "timespan"),
        required_artifacts=(BFCACHE_FAILURES_ARTIFACT,),
    )

    @property
    def meta(self) -> AuditMeta:
        return self._META

    def audit(self, artifacts: Mapping[str, object]) -> AuditProduct:
        failures: Sequence[BFCacheFailure] = artifacts[BFCACHE_FAILURES_ARTIFACT]  # type: ignore[assignment]
        if not failures:
            get_observability().log_bf_cache_evaluated(
                failure_count=0, reason_count=0, actionable_count=0, score=1
            )
            return AuditProduct(score=1)

        # TODO: analyze more than one back/forward cache failure.
        reasons_tree = failures[0].not_restored_reasons_tree

        items: list[TableItem] = []
        reasons_by_type: dict[str, list[str]] = {}
        actionable_count = 0

        for failure_type in ORDERED_FAILURE_TYPES:
            reasons_map = reasons_tree[failure_type]
            reasons_by_type[failure_type] = list(reasons_map)

            for reason in reasons_map:
                if failure_type == FAILURE_TYPE_PAGE_SUPPORT_NEEDED:
                    actionable_count += 1

                frame_urls = reasons_map[reason] or []
                items.append(
                    TableItem(
                        values={
                            "reason": describe_reason(reason),
                            "failureType": FAILURE_TYPE_TO_STRING[failure_type],
                        },
                        sub_items=SubItems(
                            items=[{"frameUrl": frame_url} for frame_url in frame_urls]
                        ),
                    )
                )

        score = 0 if actionable_count else 1
        get_observability().log_bf_cache_evaluated(
            failure_count=len(failures),
            reason_count=len(items),
            actionable_count=actionable_count,
            score=score,
            reasons=reasons_by_type,
        )
        return AuditProduct(
            score=score,
            display_value=str_(UI_STRINGS["display_value"], {"itemCount": actionable_count}),
            details=make_table_details(TABLE_HEADINGS, items),
        )
