"""JSON-file-backed document collections.

A ``DocumentStore`` is a directory of collections, one JSON file each,
sharing a single re-entrant lock. Every collection operation runs under
that lock, which makes ``update_one`` with a ``$gte`` filter and an
``$inc`` update an atomic conditional decrement, and lets a unit of
work hold the lock across several operations.

Supported filter syntax::

    {"field": value}                                  equality
    {"field": {"$gte": n}}                            numeric lower bound
    {"field": {"$regex": p, "$options": "i"}}         pattern, text values only
    {"$or": [filter, ...]}

Supported update operators are ``$set`` and ``$inc``.
"""

from __future__ import annotations

import copy
import json
import re
import threading
from pathlib import Path
from typing import Any
from uuid import uuid4

from lessonshop.domain.exceptions import StorageError

Document = dict[str, Any]
Filter = dict[str, Any]


class DocumentStore:

    def __init__(self, data_dir: Path | None = None) -> None:
        self._data_dir = data_dir
        self._lock = threading.RLock()
        self._collections: dict[str, JsonCollection] = {}

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def collection(self, name: str) -> JsonCollection:
        with self._lock:
            if name not in self._collections:
                path = self._data_dir / f"{name}.json" if self._data_dir is not None else None
                self._collections[name] = JsonCollection(path, self._lock)
            return self._collections[name]


class JsonCollection:
    """A list of JSON documents keyed by ``_id``.

    With a *file_path* every operation reads and rewrites the file.
    Atomicity comes from the in-process lock only, so a data directory
    must be owned by one process at a time. Without a *file_path*,
    documents are kept in memory.
    """

    def __init__(self, file_path: Path | None, lock: threading.RLock) -> None:
        self._file_path = file_path
        self._lock = lock
        self._memory: list[Document] = []
        if file_path is not None:
            self._ensure_file()

    # --- Collection interface ----------------------------------------------

    def find(self, flt: Filter | None = None) -> list[Document]:
        with self._lock:
            return [copy.deepcopy(d) for d in self._load() if _matches(d, flt or {})]

    def find_one(self, flt: Filter) -> Document | None:
        with self._lock:
            for doc in self._load():
                if _matches(doc, flt):
                    return copy.deepcopy(doc)
            return None

    def insert_one(self, document: Document) -> str:
        with self._lock:
            docs = self._load()
            doc = copy.deepcopy(document)
            doc.setdefault("_id", uuid4().hex)
            if any(d["_id"] == doc["_id"] for d in docs):
                raise StorageError(f"Duplicate id {doc['_id']}")
            docs.append(doc)
            self._persist(docs)
            return doc["_id"]

    def update_one(self, flt: Filter, update: dict[str, Document]) -> int:
        """Apply *update* to the first matching document. Returns matched count."""
        unknown = set(update) - {"$set", "$inc"}
        if unknown:
            raise ValueError(f"Unsupported update operators: {sorted(unknown)}")
        with self._lock:
            docs = self._load()
            for doc in docs:
                if not _matches(doc, flt):
                    continue
                for key, value in update.get("$set", {}).items():
                    doc[key] = copy.deepcopy(value)
                for key, delta in update.get("$inc", {}).items():
                    doc[key] = doc.get(key, 0) + delta
                self._persist(docs)
                return 1
            return 0

    def delete_one(self, flt: Filter) -> int:
        with self._lock:
            docs = self._load()
            for i, doc in enumerate(docs):
                if _matches(doc, flt):
                    del docs[i]
                    self._persist(docs)
                    return 1
            return 0

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> list[Document]:
        if self._file_path is None:
            return self._memory
        try:
            return json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise StorageError(f"Could not read {self._file_path.name}") from exc

    def _persist(self, docs: list[Document]) -> None:
        if self._file_path is None:
            self._memory = docs
            return
        try:
            self._file_path.write_text(json.dumps(docs, indent=2) + "\n", encoding="utf-8")
        except (OSError, TypeError) as exc:
            raise StorageError(f"Could not write {self._file_path.name}") from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")


# --- Filter evaluation --------------------------------------------------------


def _matches(doc: Document, flt: Filter) -> bool:
    for key, cond in flt.items():
        if key == "$or":
            if not any(_matches(doc, sub) for sub in cond):
                return False
            continue
        value = doc.get(key)
        if isinstance(cond, dict):
            if not _matches_operators(value, cond):
                return False
        elif value != cond:
            return False
    return True


def _matches_operators(value: Any, cond: dict[str, Any]) -> bool:
    for op, arg in cond.items():
        if op == "$gte":
            if not _is_number(value) or value < arg:
                return False
        elif op == "$regex":
            # Patterns only ever match text, never numbers.
            if not isinstance(value, str):
                return False
            flags = re.IGNORECASE if "i" in cond.get("$options", "") else 0
            if re.search(arg, value, flags) is None:
                return False
        elif op == "$options":
            continue
        else:
            raise ValueError(f"Unsupported filter operator: {op}")
    return True


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
