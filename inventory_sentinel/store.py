from __future__ import annotations

import re
from collections import OrderedDict
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from sqlmodel import SQLModel

Record = TypeVar("Record", bound=SQLModel)

_SUFFIX_RE = re.compile(r"^\d+$")


def next_id(prefix: str, ids: Iterable[str], width: int = 3) -> str:
    """
    Next sequential id for ``prefix``: max numeric suffix of the existing ids + 1, zero padded.
    Ids with a missing or non-numeric suffix count as 0.
    """
    highest = 0
    head = f"{prefix}-"
    for existing in ids:
        if not existing or not existing.startswith(head):
            continue
        suffix = existing[len(head):]
        if _SUFFIX_RE.match(suffix):
            highest = max(highest, int(suffix))
    return f"{prefix}-{highest + 1:0{width}d}"


def text_matches(query: Optional[str], *values: Any) -> bool:
    """Case-insensitive substring search over the given values (None values are skipped)."""
    if not query:
        return True
    needle = query.strip().lower()
    for v in values:
        if v is None:
            continue
        if needle in str.lower(v if isinstance(v, str) else str(v)):
            return True
    return False


class EntityStore(Generic[Record]):
    """
    In-memory ordered store for one entity type.

    Records are kept in insertion order keyed by id. Every read returns a copy, so callers
    can never mutate the stored record by accident. Nothing here validates or raises:
    a missing id is reported as None (get/update) or False (delete).
    """

    def __init__(self, model: Type[Record], prefix: str, records: Iterable[Any] = ()) -> None:
        self.model = model
        self.prefix = prefix
        self._records: "OrderedDict[str, Record]" = OrderedDict()
        for rec in records:
            self._put(rec if isinstance(rec, model) else model.model_validate(rec))

    def _put(self, record: Record) -> None:
        self._records[record.id] = record

    @staticmethod
    def _copy(record: Record) -> Record:
        return record.model_copy(deep=True)

    def count(self) -> int:
        return len(self._records)

    def ids(self) -> List[str]:
        return list(self._records.keys())

    def next_id(self) -> str:
        return next_id(self.prefix, self._records.keys())

    def list(self) -> List[Record]:
        return [self._copy(r) for r in self._records.values()]

    def get(self, record_id: str) -> Optional[Record]:
        rec = self._records.get(record_id)
        return self._copy(rec) if rec is not None else None

    def find(self, predicate: Callable[[Record], bool]) -> Optional[Record]:
        for rec in self._records.values():
            if predicate(rec):
                return self._copy(rec)
        return None

    def filter(self, predicate: Callable[[Record], bool]) -> List[Record]:
        return [self._copy(r) for r in self._records.values() if predicate(r)]

    def _build(self, record_id: str, data: Dict[str, Any]) -> Record:
        return self.model.model_validate({**data, "id": record_id})

    def _merge(self, current: Record, patch: Dict[str, Any]) -> Record:
        return current.model_copy(update=patch)

    def add(self, data: Mapping[str, Any]) -> Record:
        payload = {k: v for k, v in dict(data).items() if k != "id"}
        record = self._build(self.next_id(), payload)
        self._put(record)
        return self._copy(record)

    def update(self, record_id: str, patch: Mapping[str, Any]) -> Optional[Record]:
        current = self._records.get(record_id)
        if current is None:
            return None
        payload = {k: v for k, v in dict(patch).items() if k != "id"}
        merged = self._merge(current, payload) if payload else current
        self._records[record_id] = merged
        return self._copy(merged)

    def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None


class NestedItemStore(EntityStore[Record]):
    """
    Store for records that own a list of line items (orders, deliveries).

    Line items get ids of the form ``<item_prefix>-<parent suffix>-<counter>``. On update an
    incoming ``items`` list replaces the current one; each incoming item is merged onto the
    existing item with the same id, items without an id get a new one.
    """

    def __init__(
        self,
        model: Type[Record],
        prefix: str,
        item_model: Type[SQLModel],
        item_prefix: str,
        item_counter_start: int = 0,
        records: Iterable[Any] = (),
    ) -> None:
        self.item_model = item_model
        self.item_prefix = item_prefix
        self._item_counter = item_counter_start
        super().__init__(model, prefix, records)

    def next_item_id(self, parent_id: str) -> str:
        self._item_counter += 1
        parent_suffix = parent_id.split("-", 1)[1] if "-" in parent_id else parent_id
        return f"{self.item_prefix}-{parent_suffix}-{self._item_counter}"

    def _as_dict(self, item: Any) -> Dict[str, Any]:
        if isinstance(item, SQLModel):
            return item.model_dump(exclude_unset=True)
        return dict(item)

    def _build(self, record_id: str, data: Dict[str, Any]) -> Record:
        items = []
        for raw in data.get("items") or []:
            item = self._as_dict(raw)
            item["id"] = self.next_item_id(record_id)
            items.append(self.item_model.model_validate(item))
        return self.model.model_validate({**data, "id": record_id, "items": items})

    def _merge(self, current: Record, patch: Dict[str, Any]) -> Record:
        if "items" not in patch or patch["items"] is None:
            patch = {k: v for k, v in patch.items() if k != "items"}
            return current.model_copy(update=patch)

        existing = {item.id: item for item in current.items}
        items = []
        for raw in patch["items"]:
            item = {k: v for k, v in self._as_dict(raw).items() if k != "id" or v}
            item_id = item.get("id")
            if item_id and item_id in existing:
                items.append(existing[item_id].model_copy(update=item))
            else:
                item["id"] = item_id or self.next_item_id(current.id)
                items.append(self.item_model.model_validate(item))
        return current.model_copy(update={**patch, "items": items})
