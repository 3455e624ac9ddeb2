from __future__ import annotations

from typing import TypedDict


# PUBLIC_INTERFACE
class TaskEntity(TypedDict):
    """
    The stored representation of a task.

    Fields:
    - id: Unique integer identifier assigned by the store
    - title: Client supplied title, stored as given
    - done: Completion flag supplied at creation time
    """

    id: int
    title: str
    done: bool
