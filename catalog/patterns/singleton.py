"""
Singleton examples.

Ensure a class only has one instance, and provide a global point of access
to it.

Every example defines its singleton classes through a factory function, so
each run starts from a class that has never been instantiated and prints the
same trace no matter how many times it ran before.
"""

# pylint: disable=too-few-public-methods, unused-argument

import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Lazy instance ---


def make_lazy_singleton(out: Transcript) -> type:
    """Define a Singleton class that is created on first access."""

    class Singleton:
        _instance: Optional["Singleton"] = None

        def __init__(self) -> None:
            out.write("Constructing first Singleton instance")

        @classmethod
        def instance(cls) -> "Singleton":
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    return Singleton


@example("singleton/lazy-instance", Category.CREATIONAL, title="Lazy instance")
def lazy_instance(out: Transcript, entropy: EntropySource) -> None:
    """The instance is built on first request and reused after that."""
    singleton = make_lazy_singleton(out)

    s1 = singleton.instance()
    s2 = singleton.instance()

    if s1 is s2:
        out.write("Objects are the same instance")


# --- Load balancer ---


def make_load_balancer(entropy: EntropySource) -> type:
    """Define a LoadBalancer class guarded by double-checked locking."""

    class LoadBalancer:
        _instance: Optional["LoadBalancer"] = None
        _lock = threading.Lock()

        def __init__(self) -> None:
            self._servers = [f"Server{n}" for n in range(1, 6)]

        @classmethod
        def get_load_balancer(cls) -> "LoadBalancer":
            if cls._instance is None:
                with cls._lock:
                    if cls._instance is None:
                        cls._instance = cls()
            return cls._instance

        @property
        def server(self) -> str:
            return self._servers[entropy.randrange(len(self._servers))]

    return LoadBalancer


@example("singleton/load-balancer", Category.CREATIONAL, title="Load balancer")
def load_balancer(out: Transcript, entropy: EntropySource) -> None:
    """Every caller shares one load balancer that picks a random server per request."""
    balancer_class = make_load_balancer(entropy)

    balancers = [balancer_class.get_load_balancer() for _ in range(4)]
    if all(b is balancers[0] for b in balancers):
        out.write("Same instance\n")

    balancer = balancer_class.get_load_balancer()
    for _ in range(10):
        out.write(f"Dispatch Request to: {balancer.server}")


# --- Server balancer ---


@dataclass(frozen=True)
class Server:
    name: str
    ip: str


def make_server_balancer(entropy: EntropySource) -> type:
    """Define a LoadBalancer whose instance exists as soon as the class does."""

    class LoadBalancer:
        _instance: "LoadBalancer"

        def __init__(self) -> None:
            self._servers: List[Server] = [
                Server(f"Server{n}", f"120.14.220.{17 + n}") for n in range(1, 6)
            ]

        @classmethod
        def get_load_balancer(cls) -> "LoadBalancer":
            return cls._instance

        @property
        def next_server(self) -> Server:
            return entropy.choice(self._servers)

    LoadBalancer._instance = LoadBalancer()
    return LoadBalancer


@example("singleton/server-balancer", Category.CREATIONAL, title="Server balancer")
def server_balancer(out: Transcript, entropy: EntropySource) -> None:
    """An eagerly built balancer hands out server records instead of names."""
    balancer_class = make_server_balancer(entropy)

    balancers = [balancer_class.get_load_balancer() for _ in range(4)]
    if all(b is balancers[0] for b in balancers):
        out.write("Same instance\n")

    balancer = balancer_class.get_load_balancer()
    for _ in range(10):
        out.write(f"Dispatch request to: {balancer.next_server.name}")


# --- Eager instance ---


def make_site_structure(out: Transcript) -> type:
    """Define a SiteStructure class with an eagerly created instance."""

    class SiteStructure:
        instance: "SiteStructure"

        def __init__(self) -> None:
            out.write("SiteStructure instance created with its class")

    SiteStructure.instance = SiteStructure()
    return SiteStructure


@example("singleton/eager-instance", Category.CREATIONAL, title="Eager instance")
def eager_instance(out: Transcript, entropy: EntropySource) -> None:
    """The instance is created when the class is defined, before anyone asks for it."""
    site_structure = make_site_structure(out)

    s1 = site_structure.instance
    s2 = site_structure.instance

    if s1 is s2:
        out.write("Objects are the same instance")


# --- Thread safety ---


def make_thread_variants() -> List[Tuple[str, Callable[[], object]]]:
    """Define one accessor per thread-safety strategy.

    Returns:
        (name, accessor) pairs; each accessor returns the variant's instance
    """

    class UnguardedSingleton:
        _instance: Optional["UnguardedSingleton"] = None

        @classmethod
        def instance(cls) -> "UnguardedSingleton":
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    class LockedSingleton:
        _instance: Optional["LockedSingleton"] = None
        _lock = threading.Lock()

        @classmethod
        def instance(cls) -> "LockedSingleton":
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
                return cls._instance

    class DoubleCheckedSingleton:
        _instance: Optional["DoubleCheckedSingleton"] = None
        _lock = threading.Lock()

        @classmethod
        def instance(cls) -> "DoubleCheckedSingleton":
            if cls._instance is None:
                with cls._lock:
                    if cls._instance is None:
                        cls._instance = cls()
            return cls._instance

    class EagerSingleton:
        _instance: "EagerSingleton"

        @classmethod
        def instance(cls) -> "EagerSingleton":
            return cls._instance

    EagerSingleton._instance = EagerSingleton()

    return [
        ("UnguardedSingleton", UnguardedSingleton.instance),
        ("LockedSingleton", LockedSingleton.instance),
        ("DoubleCheckedSingleton", DoubleCheckedSingleton.instance),
        ("EagerSingleton", EagerSingleton.instance),
    ]


@example("singleton/thread-safety", Category.CREATIONAL, title="Thread safety")
def thread_safety(out: Transcript, entropy: EntropySource) -> None:
    """Unguarded, locked, double-checked and eager singletons side by side."""
    calls = 32
    workers = 8

    for name, accessor in make_thread_variants():
        if name == "UnguardedSingleton":
            # Only safe from a single thread
            instances = [accessor() for _ in range(calls)]
            where = "one thread"
        else:
            with ThreadPoolExecutor(max_workers=workers) as executor:
                futures = [executor.submit(accessor) for _ in range(calls)]
                instances = [future.result() for future in futures]
            where = f"{workers} threads"

        distinct = len({id(instance) for instance in instances})
        noun = "instance" if distinct == 1 else "instances"
        out.write(f"{name}: {distinct} distinct {noun} across {calls} calls from {where}")
