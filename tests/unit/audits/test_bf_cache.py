import unittest
from collections.abc import Mapping, Sequence

from audits.bf_cache import BFCacheAudit
from audits.contracts import BFCacheFailure
from audits.serialization import product_to_dict


def _failure(
    page_support_needed: Mapping[str, Sequence[str] | None] | None = None,
    circumstantial: Mapping[str, Sequence[str] | None] | None = None,
    support_pending: Mapping[str, Sequence[str] | None] | None = None,
) -> BFCacheFailure:
    return BFCacheFailure(
        not_restored_reasons_tree={
            "PageSupportNeeded": page_support_needed or {},
            "Circumstantial": circumstantial or {},
            "SupportPending": support_pending or {},
        }
    )


def _artifacts(*failures: BFCacheFailure) -> dict[str, object]:
    return {"BFCacheFailures": list(failures)}


class TestBFCacheAudit(unittest.TestCase):
    def test_no_failures_passes_without_details(self) -> None:
        product = BFCacheAudit().audit(_artifacts())

        self.assertEqual(product.score, 1)
        self.assertIsNone(product.display_value)
        self.assertIsNone(product.details)
        self.assertEqual(product_to_dict(product), {"score": 1})

    def test_single_actionable_reason_fails(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(_failure(page_support_needed={"WebSocket": ["https://example.com/"]}))
        )

        self.assertEqual(product.score, 0)
        self.assertEqual(product.display_value, "1 actionable failure reason")
        assert product.details is not None
        self.assertEqual(len(product.details.items), 1)
        item = product.details.items[0]
        self.assertEqual(
            item.values["reason"], "Pages with WebSocket cannot enter back/forward cache."
        )
        self.assertEqual(item.values["failureType"], "Actionable")
        assert item.sub_items is not None
        self.assertEqual(item.sub_items.items, ({"frameUrl": "https://example.com/"},))

    def test_two_actionable_reasons_use_plural_display_value(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(
                _failure(
                    page_support_needed={
                        "WebSocket": ["https://example.com/"],
                        "MainResourceHasCacheControlNoStore": ["https://example.com/"],
                    }
                )
            )
        )

        self.assertEqual(product.score, 0)
        self.assertEqual(product.display_value, "2 actionable failure reasons")

    def test_actionable_count_is_per_reason_not_per_frame(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(
                _failure(
                    page_support_needed={
                        "WebSocket": [
                            "https://example.com/",
                            "https://frame.example.com/a",
                            "https://frame.example.com/b",
                        ]
                    }
                )
            )
        )

        self.assertEqual(product.display_value, "1 actionable failure reason")
        assert product.details is not None
        sub_items = product.details.items[0].sub_items
        assert sub_items is not None
        self.assertEqual(len(sub_items.items), 3)

    def test_non_actionable_reasons_pass_but_are_listed(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(
                _failure(
                    circumstantial={"BackForwardCacheDisabled": ["https://example.com/"]},
                    support_pending={"WebRTC": ["https://example.com/"]},
                )
            )
        )

        self.assertEqual(product.score, 1)
        self.assertEqual(product.display_value, "0 actionable failure reasons")
        assert product.details is not None
        self.assertEqual(
            [item.values["failureType"] for item in product.details.items],
            ["Not actionable", "Pending browser support"],
        )

    def test_rows_follow_failure_type_order(self) -> None:
        tree = {
            "SupportPending": {"WebRTC": []},
            "Circumstantial": {"CacheLimit": []},
            "PageSupportNeeded": {"WebSocket": []},
        }
        product = BFCacheAudit().audit(
            _artifacts(BFCacheFailure(not_restored_reasons_tree=tree))
        )

        assert product.details is not None
        self.assertEqual(
            [item.values["failureType"] for item in product.details.items],
            ["Actionable", "Not actionable", "Pending browser support"],
        )

    def test_reasons_within_a_type_keep_input_order(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(
                _failure(
                    page_support_needed={
                        "ZReasonFirst": [],
                        "AReasonSecond": [],
                        "MReasonThird": [],
                    }
                )
            )
        )

        assert product.details is not None
        self.assertEqual(
            [item.values["reason"] for item in product.details.items],
            ["ZReasonFirst", "AReasonSecond", "MReasonThird"],
        )

    def test_unknown_reason_is_verbatim(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(_failure(circumstantial={"SomeFutureReason": ["https://example.com/"]}))
        )

        assert product.details is not None
        self.assertEqual(product.details.items[0].values["reason"], "SomeFutureReason")

    def test_empty_and_missing_frame_urls_render_empty_sub_items(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(_failure(page_support_needed={"WebSocket": [], "WebRTC": None}))
        )

        assert product.details is not None
        for item in product.details.items:
            assert item.sub_items is not None
            self.assertEqual(item.sub_items.items, ())

    def test_only_first_failure_is_analyzed(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(
                _failure(circumstantial={"CacheLimit": []}),
                _failure(page_support_needed={"WebSocket": []}),
            )
        )

        self.assertEqual(product.score, 1)
        assert product.details is not None
        self.assertEqual(len(product.details.items), 1)

    def test_table_headings_match_renderer_shape(self) -> None:
        product = BFCacheAudit().audit(
            _artifacts(_failure(page_support_needed={"WebSocket": ["https://example.com/"]}))
        )

        data = product_to_dict(product)
        self.assertEqual(
            data["details"]["headings"],
            [
                {
                    "key": "reason",
                    "valueType": "text",
                    "subItemsHeading": {"key": "frameUrl", "valueType": "url"},
                    "label": "Failure reason",
                },
                {"key": "failureType", "valueType": "text", "label": "Failure type"},
            ],
        )
        self.assertEqual(
            data["details"]["items"],
            [
                {
                    "reason": "Pages with WebSocket cannot enter back/forward cache.",
                    "failureType": "Actionable",
                    "subItems": {
                        "type": "subitems",
                        "items": [{"frameUrl": "https://example.com/"}],
                    },
                }
            ],
        )

    def test_empty_tree_keeps_both_columns(self) -> None:
        product = BFCacheAudit().audit(_artifacts(_failure()))

        self.assertEqual(product.score, 1)
        assert product.details is not None
        self.assertEqual(
            [heading.key for heading in product.details.headings], ["reason", "failureType"]
        )
        self.assertEqual(product.details.items, ())

    def test_missing_failure_type_propagates(self) -> None:
        failure = BFCacheFailure(not_restored_reasons_tree={"PageSupportNeeded": {}})
        with self.assertRaises(KeyError):
            BFCacheAudit().audit(_artifacts(failure))

    def test_meta(self) -> None:
        meta = BFCacheAudit().meta
        self.assertEqual(meta.id, "bf-cache")
        self.assertEqual(meta.supported_modes, ("navigation", "timespan"))
        self.assertEqual(meta.required_artifacts, ("BFCacheFailures",))
        self.assertEqual(meta.failure_title, "Back/forward failed with actionable reasons")


if __name__ == "__main__":
    unittest.main()
