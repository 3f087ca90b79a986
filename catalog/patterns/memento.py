"""
Memento examples.

Without violating encapsulation, capture and externalize an object's internal
state so that the object can be restored to this state later.
"""

# pylint: disable=too-few-public-methods, unused-argument

from dataclasses import dataclass
from typing import List

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- On/off switch ---


class SwitchMemento:
    """Snapshot of a switch state; announces itself when taken."""

    def __init__(self, out: Transcript, state: str) -> None:
        out.write("\nSaving Originator state...")
        self.state = state
        out.write("Originator state has been saved\n")


class Switch:
    def __init__(self, out: Transcript, state: str) -> None:
        self.out = out
        self._state = state
        out.write(f"Originator current state: {state}")

    @property
    def state(self) -> str:
        return self._state

    @state.setter
    def state(self, value: str) -> None:
        self._state = value
        self.out.write(f"Originator state has been changed to: {value}")

    def create_memento(self) -> SwitchMemento:
        return SwitchMemento(self.out, self._state)

    def set_memento(self, memento: SwitchMemento) -> None:
        self.out.write("\nRestoring Originator state...")
        self.state = memento.state
        self.out.write("Originator state has been restored\n")


class Caretaker:
    def __init__(self, memento: SwitchMemento) -> None:
        self.memento = memento


@example("memento/on-off-switch", Category.BEHAVIORAL, title="On/off switch")
def on_off_switch(out: Transcript, entropy: EntropySource) -> None:
    """A caretaker holds a switch's snapshot so the switch can be rolled back."""
    switch = Switch(out, "On")

    caretaker = Caretaker(switch.create_memento())
    switch.state = "Off"
    switch.set_memento(caretaker.memento)

    switch.state = "Off"
    caretaker = Caretaker(switch.create_memento())
    switch.state = "On"
    switch.set_memento(caretaker.memento)


# --- Sales prospect ---


@dataclass(frozen=True)
class ProspectMemento:
    name: str
    phone: str
    budget: float


class SalesProspect:
    """Prospect whose fields announce every change."""

    def __init__(self, out: Transcript) -> None:
        self.out = out
        self._name = ""
        self._phone = ""
        self._budget = 0.0

    @property
    def name(self) -> str:
        return self._name

    @name.setter
    def name(self, value: str) -> None:
        self._name = value
        self.out.write(f"Name:  {value}")

    @property
    def phone(self) -> str:
        return self._phone

    @phone.setter
    def phone(self, value: str) -> None:
        self._phone = value
        self.out.write(f"Phone: {value}")

    @property
    def budget(self) -> float:
        return self._budget

    @budget.setter
    def budget(self, value: float) -> None:
        self._budget = value
        self.out.write(f"Budget: {value:g}")

    def save_memento(self) -> ProspectMemento:
        self.out.write("\nSaving state --\n")
        return ProspectMemento(self._name, self._phone, self._budget)

    def restore_memento(self, memento: ProspectMemento) -> None:
        self.out.write("\nRestoring state --\n")
        self.name = memento.name
        self.phone = memento.phone
        self.budget = memento.budget


@example("memento/sales-prospect", Category.BEHAVIORAL, title="Sales prospect")
def sales_prospect(out: Transcript, entropy: EntropySource) -> None:
    """Save a sales prospect, overwrite it, then restore the saved values."""
    prospect = SalesProspect(out)
    prospect.name = "Bob Northrop"
    prospect.phone = "(705) 123-4567"
    prospect.budget = 17000.0

    saved = prospect.save_memento()

    prospect.name = "Eve Ugly"
    prospect.phone = "(416) 456-1239"
    prospect.budget = 700000.0

    prospect.restore_memento(saved)


# --- State history ---


@dataclass(frozen=True)
class StateMemento:
    state: str


class HistoryOriginator:
    def __init__(self, out: Transcript) -> None:
        self.out = out
        self.state = ""

    def save(self) -> StateMemento:
        self.out.write("Saving Originator state...")
        memento = StateMemento(self.state)
        self.out.write("Originator state has been saved.")
        return memento

    def restore(self, memento: StateMemento) -> None:
        self.out.write("Restoring Originator state...")
        self.state = memento.state
        self.out.write("Originator state has been restored.")

    def show_state(self) -> None:
        self.out.write(f"{self.state}\n")


class History:
    """Caretaker keeping every snapshot in order."""

    def __init__(self) -> None:
        self._mementos: List[StateMemento] = []

    def add(self, memento: StateMemento) -> None:
        self._mementos.append(memento)

    def get(self, index: int) -> StateMemento:
        return self._mementos[index]


@example("memento/state-history", Category.BEHAVIORAL, title="State history")
def state_history(out: Transcript, entropy: EntropySource) -> None:
    """Keep a list of snapshots and restore any earlier one by index."""
    originator = HistoryOriginator(out)
    history = History()

    for number in range(3):
        originator.state = f"State {number}"
        history.add(originator.save())
        originator.show_state()

    for index in (0, 1):
        originator.restore(history.get(index))
        originator.show_state()
