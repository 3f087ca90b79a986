"""
Strategy examples.

Define a family of algorithms, encapsulate each one, and make them
interchangeable. Strategy lets the algorithm vary independently from the
clients that use it.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from typing import List

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Algorithms ---


class AlgorithmStrategy(ABC):
    def __init__(self, out: Transcript) -> None:
        self.out = out

    def algorithm_interface(self) -> None:
        self.out.write(f"Called {type(self).__name__}.algorithm_interface()")


class ConcreteStrategyA(AlgorithmStrategy):
    pass


class ConcreteStrategyB(AlgorithmStrategy):
    pass


class ConcreteStrategyC(AlgorithmStrategy):
    pass


class Context:
    def __init__(self, strategy: AlgorithmStrategy) -> None:
        self._strategy = strategy

    def context_interface(self) -> None:
        self._strategy.algorithm_interface()


@example("strategy/algorithms", Category.BEHAVIORAL, title="Algorithms")
def algorithms(out: Transcript, entropy: EntropySource) -> None:
    """A context delegates to whichever strategy it was configured with."""
    for strategy in (ConcreteStrategyA(out), ConcreteStrategyB(out), ConcreteStrategyC(out)):
        Context(strategy).context_interface()


# --- Sorted records ---


class SortStrategy(ABC):
    name = ""

    @abstractmethod
    def sort(self, items: List[str]) -> List[str]:
        """Return a sorted copy of the items."""


class QuickSort(SortStrategy):
    name = "QuickSorted"

    def sort(self, items: List[str]) -> List[str]:
        if len(items) <= 1:
            return list(items)
        pivot, rest = items[0], items[1:]
        lower = [item for item in rest if item < pivot]
        upper = [item for item in rest if item >= pivot]
        return self.sort(lower) + [pivot] + self.sort(upper)


class ShellSort(SortStrategy):
    name = "ShellSorted"

    def sort(self, items: List[str]) -> List[str]:
        result = list(items)
        gap = len(result) // 2
        while gap > 0:
            for i in range(gap, len(result)):
                value = result[i]
                j = i
                while j >= gap and result[j - gap] > value:
                    result[j] = result[j - gap]
                    j -= gap
                result[j] = value
            gap //= 2
        return result


class MergeSort(SortStrategy):
    name = "MergeSorted"

    def sort(self, items: List[str]) -> List[str]:
        if len(items) <= 1:
            return list(items)
        middle = len(items) // 2
        left = self.sort(items[:middle])
        right = self.sort(items[middle:])

        merged: List[str] = []
        i = j = 0
        while i < len(left) and j < len(right):
            if left[i] <= right[j]:
                merged.append(left[i])
                i += 1
            else:
                merged.append(right[j])
                j += 1
        return merged + left[i:] + right[j:]


class SortedList:
    def __init__(self, out: Transcript) -> None:
        self.out = out
        self._items: List[str] = []
        self._strategy: SortStrategy = QuickSort()

    def set_sort_strategy(self, strategy: SortStrategy) -> None:
        self._strategy = strategy

    def add(self, name: str) -> None:
        self._items.append(name)

    def sort(self) -> None:
        self._items = self._strategy.sort(self._items)
        self.out.write(f"{self._strategy.name} list")
        self.print()

    def print(self) -> None:
        for name in self._items:
            self.out.write(f" {name}")
        self.out.write()


@example("strategy/sorted-records", Category.BEHAVIORAL, title="Sorted records")
def sorted_records(out: Transcript, entropy: EntropySource) -> None:
    """A record list swaps its sorting algorithm at run time."""
    records = SortedList(out)
    for name in ("Samual", "Jimmy", "Sandra", "Vivek", "Anna", "Mike"):
        records.add(name)
    records.print()

    for strategy in (QuickSort(), ShellSort(), MergeSort()):
        records.set_sort_strategy(strategy)
        records.sort()
