"""
Object Pool example.

Reuse objects that are expensive to create: a client borrows an object from
the pool and returns it when done instead of discarding it.
"""

# pylint: disable=too-few-public-methods, unused-argument

from collections import deque
from typing import Deque, Optional

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


class Resource:
    def __init__(self, serial: int) -> None:
        self.serial = serial
        self.value = 0

    def reset(self) -> None:
        self.value = 0

    def __str__(self) -> str:
        return f"Resource #{self.serial}"


class ObjectPool:
    """Hands out idle resources first-in first-out, creating new ones on demand."""

    def __init__(self, out: Transcript) -> None:
        self.out = out
        self._idle: Deque[Resource] = deque()
        self._created = 0

    def get_resource(self) -> Resource:
        if not self._idle:
            self.out.write("Creating a new Resource.")
            self._created += 1
            return Resource(self._created)

        self.out.write("Reusing an existing Resource.")
        return self._idle.popleft()

    def return_resource(self, resource: Optional[Resource]) -> None:
        if resource is not None:
            resource.reset()
            self._idle.append(resource)


@example("object-pool/resource-reuse", Category.CREATIONAL, title="Resource reuse")
def resource_reuse(out: Transcript, entropy: EntropySource) -> None:
    """Returned resources are reset and handed out again before new ones are made."""
    pool = ObjectPool(out)

    def show(label: str, resource: Resource) -> None:
        out.write(f"{label} = {resource.value} [{resource}]")

    r1 = pool.get_resource()
    r1.value = 10
    show("r1", r1)

    r2 = pool.get_resource()
    r2.value = 20
    show("r2", r2)

    r3 = pool.get_resource()
    r3.value = 30
    show("r3", r3)

    pool.return_resource(r1)
    pool.return_resource(r2)

    r1 = pool.get_resource()
    show("r1", r1)
    r2 = pool.get_resource()
    show("r2", r2)
    r3 = pool.get_resource()
    show("r3", r3)
