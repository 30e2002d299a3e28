"""In-memory document store used as the datastore for every service."""
import logging
import uuid
from contextlib import asynccontextmanager
from typing import Any, Callable, Optional, TypeVar

from schooldesk.config import settings
from schooldesk.models.base import Document

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Document)


def new_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:settings.id_suffix_length]}"


class Store:
    """Collections of documents keyed by id.

    Reads hand out copies and writes store copies, so a caller holding a
    document never mutates stored state without calling ``save``.
    """

    def __init__(self):
        self._collections: dict[str, dict[str, Document]] = {}

    def _collection(self, model: type[Document]) -> dict[str, Document]:
        return self._collections.setdefault(model.Settings.name, {})

    async def get(self, model: type[T], doc_id: str) -> Optional[T]:
        doc = self._collection(model).get(doc_id)
        if doc is None:
            return None
        return doc.model_copy(deep=True)

    async def find(
        self,
        model: type[T],
        *predicates: Callable[[T], bool],
        **filters: Any,
    ) -> list[T]:
        """Documents whose fields equal ``filters`` and satisfy every predicate, in insertion order."""
        results = []
        for doc in self._collection(model).values():
            if any(getattr(doc, field) != value for field, value in filters.items()):
                continue
            if not all(predicate(doc) for predicate in predicates):
                continue
            results.append(doc.model_copy(deep=True))
        return results

    async def find_one(
        self,
        model: type[T],
        *predicates: Callable[[T], bool],
        **filters: Any,
    ) -> Optional[T]:
        found = await self.find(model, *predicates, **filters)
        return found[0] if found else None

    async def insert(self, doc: T) -> T:
        collection = self._collection(type(doc))
        if not doc.id:
            doc.id = new_id(type(doc).Settings.prefix)
        if doc.id in collection:
            raise ValueError(f"Duplicate id {doc.id} in {type(doc).Settings.name}")
        collection[doc.id] = doc.model_copy(deep=True)
        return doc

    async def insert_many(self, docs: list[T]) -> list[T]:
        for doc in docs:
            await self.insert(doc)
        return docs

    async def save(self, doc: T) -> T:
        """Insert or replace ``doc`` by id."""
        if not doc.id:
            return await self.insert(doc)
        self._collection(type(doc))[doc.id] = doc.model_copy(deep=True)
        return doc

    async def delete(self, model: type[Document], doc_id: str) -> bool:
        return self._collection(model).pop(doc_id, None) is not None

    async def count(self, model: type[Document]) -> int:
        return len(self._collection(model))

    @asynccontextmanager
    async def transaction(self):
        """Apply every write in the block or none of them.

        Stored documents are never mutated in place, so a shallow copy of each
        collection is enough to restore the prior state.
        """
        snapshot = {name: dict(docs) for name, docs in self._collections.items()}
        try:
            yield self
        except BaseException:
            self._collections = snapshot
            logger.debug("Transaction rolled back")
            raise

    def reset(self) -> None:
        self._collections = {}
