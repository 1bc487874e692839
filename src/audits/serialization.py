from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .contracts import AuditProduct, AuditResult, TableDetails, TableHeading, TableItem


def product_to_dict(product: AuditProduct) -> dict[str, Any]:
    data: dict[str, Any] = {"score": product.score}
    if product.display_value is not None:
        data["displayValue"] = product.display_value
    if product.details is not None:
        data["details"] = details_to_dict(product.details)
    return data


def result_to_dict(result: AuditResult) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": result.id,
        "title": result.title,
        "description": result.description,
        "score": result.score,
        "scoreDisplayMode": result.score_display_mode,
    }
    if result.display_value is not None:
        data["displayValue"] = result.display_value
    if result.details is not None:
        data["details"] = details_to_dict(result.details)
    if result.error_message is not None:
        data["errorMessage"] = result.error_message
    return data


def details_to_dict(details: TableDetails) -> dict[str, Any]:
    return {
        "type": "table",
        "headings": [_heading_to_dict(heading) for heading in details.headings],
        "items": [_item_to_dict(item) for item in details.items],
    }


def serialize_results(results: Mapping[str, AuditResult]) -> str:
    payload = {"audits": {audit_id: result_to_dict(result) for audit_id, result in results.items()}}
    return json.dumps(payload, indent=2)


def _heading_to_dict(heading: TableHeading) -> dict[str, Any]:
    data: dict[str, Any] = {"key": heading.key, "valueType": heading.value_type}
    if heading.sub_items_heading is not None:
        data["subItemsHeading"] = {
            "key": heading.sub_items_heading.key,
            "valueType": heading.sub_items_heading.value_type,
        }
    data["label"] = heading.label
    return data


def _item_to_dict(item: TableItem) -> dict[str, Any]:
    data: dict[str, Any] = dict(item.values)
    if item.sub_items is not None:
        data["subItems"] = {
            "type": "subitems",
            "items": [dict(sub_item) for sub_item in item.sub_items.items],
        }
    return data
