"""
Mediator examples.

Define an object that encapsulates how a set of objects interact. Colleagues
never refer to each other directly; they talk through the mediator.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from typing import Dict, Optional

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Colleagues ---


class Mediator(ABC):
    @abstractmethod
    def send(self, message: str, colleague: "Colleague") -> None:
        """Deliver a message from one colleague to the other."""


class Colleague:
    def __init__(self, out: Transcript, mediator: Mediator) -> None:
        self.out = out
        self.mediator = mediator

    def send(self, message: str) -> None:
        self.mediator.send(message, self)

    def notify(self, message: str) -> None:
        self.out.write(f"{type(self).__name__} gets message: {message}")


class Colleague1(Colleague):
    pass


class Colleague2(Colleague):
    pass


class ConcreteMediator(Mediator):
    def __init__(self) -> None:
        self.colleague1: Optional[Colleague1] = None
        self.colleague2: Optional[Colleague2] = None

    def send(self, message: str, colleague: Colleague) -> None:
        recipient = self.colleague2 if colleague is self.colleague1 else self.colleague1
        if recipient is not None:
            recipient.notify(message)


@example("mediator/colleagues", Category.BEHAVIORAL, title="Colleagues")
def colleagues(out: Transcript, entropy: EntropySource) -> None:
    """Two colleagues exchange messages only through a mediator."""
    mediator = ConcreteMediator()

    c1 = Colleague1(out, mediator)
    c2 = Colleague2(out, mediator)

    mediator.colleague1 = c1
    mediator.colleague2 = c2

    c1.send("How are you?")
    c2.send("Fine, thanks")


# --- Chatroom ---


class Chatroom:
    """Routes messages between registered participants by name.

    Messages to names that never registered are dropped.
    """

    def __init__(self) -> None:
        self._participants: Dict[str, Participant] = {}

    def register(self, participant: "Participant") -> None:
        self._participants.setdefault(participant.name, participant)
        participant.chatroom = self

    def send(self, sender: str, recipient: str, message: str) -> None:
        participant = self._participants.get(recipient)
        if participant is not None:
            participant.receive(sender, message)


class Participant:
    audience = ""

    def __init__(self, out: Transcript, name: str) -> None:
        self.out = out
        self.name = name
        self.chatroom: Optional[Chatroom] = None

    def send(self, recipient: str, message: str) -> None:
        if self.chatroom is not None:
            self.chatroom.send(self.name, recipient, message)

    def receive(self, sender: str, message: str) -> None:
        self.out.write(f"{self.audience}{sender} to {self.name}: '{message}'")


class Beatle(Participant):
    audience = "To a Beatle: "


class NonBeatle(Participant):
    audience = "To a non-Beatle: "


@example("mediator/chatroom", Category.BEHAVIORAL, title="Chatroom")
def chatroom(out: Transcript, entropy: EntropySource) -> None:
    """A chatroom mediates messages between named participants."""
    room = Chatroom()

    george = Beatle(out, "George")
    paul = Beatle(out, "Paul")
    ringo = Beatle(out, "Ringo")
    john = Beatle(out, "John")
    yoko = NonBeatle(out, "Yoko")
    mike = NonBeatle(out, "Mike")

    for participant in (george, paul, ringo, john, yoko, mike):
        room.register(participant)

    mike.send("John", "We miss you!")
    yoko.send("John", "Hi John!")
    paul.send("Ringo", "All you need is love")
    ringo.send("George", "My sweet Lord")
    paul.send("John", "Can't buy me love")
    john.send("Yoko", "My sweet love")
    john.send("Mike", "Hi Mike")
    john.send("Bob", "Hi Bob")
