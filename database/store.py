"""
In-memory store for users, projects and tasks.

Nothing is persisted: all data lives for the lifetime of the process (or of
the ``InMemoryStore`` instance handed to the app).  Each collection owns its
own id counter; ids start at 1, strictly increase and are never reused.
"""

from __future__ import annotations

import threading
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from database.models import Project, Task, User

T = TypeVar("T")


class Collection(Generic[T]):
    """Ordered list of records with an auto-incrementing integer id.

    FastAPI may run handlers in a thread pool, so id assignment, appends and
    removals happen under ``lock``.  Callers that need a check-then-act
    sequence (uniqueness checks, in-place updates) hold ``lock`` themselves;
    it is re-entrant.
    """

    def __init__(self, name: str):
        self.name = name
        self.lock = threading.RLock()
        self._items: List[T] = []
        self._next_id = 1

    def insert(self, build: Callable[[int], T]) -> T:
        """Build a record with the next id and append it."""
        with self.lock:
            item = build(self._next_id)
            self._next_id += 1
            self._items.append(item)
            return item

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        with self.lock:
            return next((item for item in self._items if predicate(item)), None)

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        with self.lock:
            return [item for item in self._items if predicate(item)]

    def remove(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Remove and return the first matching record."""
        with self.lock:
            for index, item in enumerate(self._items):
                if predicate(item):
                    return self._items.pop(index)
            return None

    def __len__(self) -> int:
        with self.lock:
            return len(self._items)


class InMemoryStore:
    def __init__(self):
        self.users: Collection[User] = Collection("users")
        self.projects: Collection[Project] = Collection("projects")
        self.tasks: Collection[Task] = Collection("tasks")

    def counts(self) -> Dict[str, int]:
        return {
            "users": len(self.users),
            "projects": len(self.projects),
            "tasks": len(self.tasks),
        }
