from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence

from .contracts import AuditMeta, AuditProduct, TableDetails, TableHeading, TableItem


class Audit(ABC):
    """Base class for audits.

    An audit reads gathered artifacts and returns an ``AuditProduct``. Audits hold
    no state between runs.
    """

    @property
    @abstractmethod
    def meta(self) -> AuditMeta:
        raise NotImplementedError

    @abstractmethod
    def audit(self, artifacts: Mapping[str, object]) -> AuditProduct:
        raise NotImplementedError

    @property
    def id(self) -> str:
        return self.meta.id

    def supports_mode(self, mode: str) -> bool:
        return mode in self.meta.supported_modes

    def missing_artifacts(self, artifacts: Mapping[str, object]) -> Sequence[str]:
        return tuple(name for name in self.meta.required_artifacts if name not in artifacts)


def make_table_details(
    headings: Sequence[TableHeading], items: Sequence[TableItem]
) -> TableDetails:
    keys = {heading.key for heading in headings}
    for item in items:
        unknown = set(item.values) - keys
        if unknown:
            unknown_list = ", ".join(sorted(unknown))
            raise ValueError(f"table item keys without heading: {unknown_list}")
    return TableDetails(headings=headings, items=items)
