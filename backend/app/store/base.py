"""
Bugboard Backend — Abstract Document Store Interface
======================================================

What:  Abstract base class defining the persistence contract of the pipeline.
Why:   The services only need five operations over two collections. Keeping
       them behind an interface lets tests run against an in-memory double
       and keeps SQL out of the business logic.
How:   Concrete stores inherit from DocumentStore and implement every
       coroutine below.

Records:
    Records are mutable objects exposing their fields as attributes
    (id, title, ..., created_at, updated_at). `id` is store-native (a UUID
    for the SQL store); services never send it over the wire without
    normalizing it first.

Concurrency:
    Each call may suspend. Implementations keep no cross-request state so
    any number of requests can use their own store instances concurrently.
    Ordering between concurrent writes to one record is last-write-wins.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Optional

POSTS = "posts"
BUGS = "bugs"
COLLECTIONS = (POSTS, BUGS)


class DocumentStore(ABC):
    """
    Contract:
        - create() assigns the id and both timestamps
        - find() applies an equality filter, then skip/limit, in creation order
        - find_by_id() returns None for unknown or malformed ids (never raises
          for a bad id)
        - save() persists in-place changes and bumps updated_at
        - remove() deletes the record by its id
    Unknown collection names raise ValueError.
    """

    @abstractmethod
    async def create(self, collection: str, fields: Mapping[str, Any]) -> Any:
        ...

    @abstractmethod
    async def find(
        self,
        collection: str,
        filter: Optional[Dict[str, Any]] = None,
        skip: int = 0,
        limit: Optional[int] = None,
    ) -> List[Any]:
        ...

    @abstractmethod
    async def find_by_id(self, collection: str, record_id: Any) -> Optional[Any]:
        ...

    @abstractmethod
    async def save(self, record: Any) -> Any:
        ...

    @abstractmethod
    async def remove(self, record: Any) -> None:
        ...
