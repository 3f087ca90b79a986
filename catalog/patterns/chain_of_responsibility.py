"""
Chain of Responsibility examples.

Avoid coupling the sender of a request to its receiver by giving more than
one object a chance to handle the request. The receiving objects are chained
and the request is passed along the chain until an object handles it.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


class MissingSuccessorError(LookupError):
    """Raised when a handler must forward a request but has nowhere to send it."""


# --- Number ranges ---


class Handler(ABC):
    """Handles requests it is responsible for, forwards the rest."""

    def __init__(self, out: Transcript, successor: Optional["Handler"] = None) -> None:
        self.out = out
        self.successor = successor

    def set_successor(self, successor: "Handler") -> None:
        """Link the next handler in the chain."""
        self.successor = successor

    @abstractmethod
    def handle_request(self, request: int) -> None:
        """Handle the request or pass it on."""


class RangeHandler(Handler):
    """Handles integers in [low, high)."""

    low = 0
    high = 0

    def handle_request(self, request: int) -> None:
        if self.low <= request < self.high:
            self.out.write(f"{type(self).__name__} handled request {request}")
        elif self.successor is not None:
            self.successor.handle_request(request)


class ConcreteHandler1(RangeHandler):
    low, high = 0, 10


class ConcreteHandler2(RangeHandler):
    low, high = 10, 20


class ConcreteHandler3(RangeHandler):
    low, high = 20, 30


class ConcreteHandler4(RangeHandler):
    low, high = 30, 40


@example(
    "chain-of-responsibility/number-ranges",
    Category.BEHAVIORAL,
    title="Number ranges",
)
def number_ranges(out: Transcript, entropy: EntropySource) -> None:
    """Linked handlers each take one range of numbers; requests nobody owns are dropped."""
    h4 = ConcreteHandler4(out)
    h3 = ConcreteHandler3(out, h4)
    h2 = ConcreteHandler2(out)
    h1 = ConcreteHandler1(out)

    h1.set_successor(h2)
    h2.set_successor(h3)

    for request in (2, 5, 14, 22, 18, 3, 27, 20, 3, 35, 50, 39, 42, 32):
        h1.handle_request(request)


# --- Purchase approval ---


@dataclass
class Purchase:
    """Purchase request details."""

    number: int
    amount: float
    purpose: str


class Approver(ABC):
    """Approves purchases up to its own limit."""

    def __init__(self, out: Transcript) -> None:
        self.out = out
        self.successor: Optional[Approver] = None

    def set_successor(self, successor: "Approver") -> None:
        self.successor = successor

    @abstractmethod
    def process_request(self, purchase: Purchase) -> None:
        """Approve the purchase or escalate it."""

    def approve(self, purchase: Purchase) -> None:
        self.out.write(
            f"{type(self).__name__} approved request# {purchase.number} for {purchase.purpose}"
        )


class Director(Approver):
    def process_request(self, purchase: Purchase) -> None:
        if purchase.amount < 10000.0:
            self.approve(purchase)
        elif self.successor is not None:
            self.successor.process_request(purchase)


class VicePresident(Approver):
    def process_request(self, purchase: Purchase) -> None:
        if purchase.amount < 25000.0:
            self.approve(purchase)
        elif self.successor is not None:
            self.successor.process_request(purchase)


class President(Approver):
    def process_request(self, purchase: Purchase) -> None:
        if purchase.amount < 100000.0:
            self.approve(purchase)
        else:
            self.out.write(f"Request# {purchase.number} requires an executive meeting!")


@example(
    "chain-of-responsibility/purchase-approval",
    Category.BEHAVIORAL,
    title="Purchase approval",
)
def purchase_approval(out: Transcript, entropy: EntropySource) -> None:
    """Managers and executives approve purchase requests or hand them to a superior."""
    larry = Director(out)
    sam = VicePresident(out)
    tammy = President(out)

    larry.set_successor(sam)
    sam.set_successor(tammy)

    larry.process_request(Purchase(2034, 350.00, "Assets"))
    larry.process_request(Purchase(2035, 32590.10, "Project X"))
    larry.process_request(Purchase(2036, 92100.00, "Project Y"))
    larry.process_request(Purchase(2037, 122100.00, "Project Y"))


# --- Daycare staff ---


class ResponsibilityLevel(Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


@dataclass
class Request:
    level: ResponsibilityLevel
    description: str


class Staff(ABC):
    """A member of staff who approves one level of request."""

    level: ResponsibilityLevel
    role = ""

    def __init__(self, out: Transcript, name: str, boss: Optional["Staff"] = None) -> None:
        self.out = out
        self.name = name
        self.boss = boss

    def process_request(self, request: Request) -> None:
        """Approve the request or pass it to the boss.

        Raises:
            MissingSuccessorError: If the request must be escalated but no boss is assigned
        """
        if request.level is self.level:
            self.out.write(f"This is {self.name}.\n{self.role}\nI have approved your request.")
            self.after_approval()
            return

        if self.boss is None:
            raise MissingSuccessorError("No boss assigned.")

        self.out.write(
            f"This is {self.name}.\n{self.role}\n{self.refusal}\n"
            f"My boss {self.boss.name} will review your request.\n"
        )
        self.boss.process_request(request)

    @property
    def refusal(self) -> str:
        return "I am not able to process your request."

    def after_approval(self) -> None:
        self.out.write()


class DaycareTeacher(Staff):
    level = ResponsibilityLevel.LOW
    role = "I am a teacher in this daycare facility."


class DaycareManager(Staff):
    level = ResponsibilityLevel.MEDIUM
    role = "I am a manager in this daycare facility."

    @property
    def refusal(self) -> str:
        return "Sorry, I am not able to process your request."


class DaycareDirector(Staff):
    level = ResponsibilityLevel.HIGH
    role = "I am a director of this daycare facility."

    def after_approval(self) -> None:
        # The director closes the chain without a trailing blank line
        pass


@example(
    "chain-of-responsibility/daycare-requests",
    Category.BEHAVIORAL,
    title="Daycare requests",
)
def daycare_requests(out: Transcript, entropy: EntropySource) -> None:
    """Parents' requests climb a daycare's organisational chart until someone can approve them."""
    director = DaycareDirector(out, "Susan")
    manager = DaycareManager(out, "Jerry", boss=director)
    teacher = DaycareTeacher(out, "Tom", boss=manager)

    requests = [
        Request(
            ResponsibilityLevel.LOW,
            "The parent requests to have a copy of their kid's daily status.",
        ),
        Request(ResponsibilityLevel.MEDIUM, "The parent requests to pay the tuition fees."),
        Request(
            ResponsibilityLevel.HIGH,
            "Mr. Jacques requests to schedule a visit for all his kids.",
        ),
    ]

    for number, request in enumerate(requests):
        if number:
            out.write()
        out.write(f"Request Info: {request.description}\n")
        teacher.process_request(request)


# --- Unbroken chain ---


@dataclass
class ValueRequest:
    description: str
    value: int


class ChainLink(ABC):
    """Base handler that owns chain traversal.

    Subclasses only decide whether they handle a request, so no link can
    forget to forward it.
    """

    def __init__(self, out: Transcript) -> None:
        self.out = out
        self._successor: Optional[ChainLink] = None

    def set_successor(self, successor: "ChainLink") -> None:
        self._successor = successor

    def handle_request(self, request: ValueRequest) -> None:
        handled = self.handle(request)
        if not handled and self._successor is not None:
            self._successor.handle_request(request)

    @abstractmethod
    def handle(self, request: ValueRequest) -> bool:
        """Handle the request if eligible; return True when handled."""

    def _report(self, kind: str, request: ValueRequest) -> None:
        name = type(self).__name__
        self.out.write(f"{kind} values are handled by {name}:")
        self.out.write(f"\t{name}.handle_request : {request.description}{request.value}")


class ConcreteHandlerOne(ChainLink):
    def handle(self, request: ValueRequest) -> bool:
        if request.value < 0:
            self._report("Negative", request)
            return True
        return False


class ConcreteHandlerTwo(ChainLink):
    def handle(self, request: ValueRequest) -> bool:
        if request.value > 0:
            self._report("Positive", request)
            return True
        return False


class ConcreteHandlerThree(ChainLink):
    def handle(self, request: ValueRequest) -> bool:
        if request.value == 0:
            self._report("Zero", request)
            return True
        return False


@example(
    "chain-of-responsibility/unbroken-chain",
    Category.BEHAVIORAL,
    title="Unbroken chain",
)
def unbroken_chain(out: Transcript, entropy: EntropySource) -> None:
    """Chain traversal lives in the base class so a link cannot break the chain."""
    h1 = ConcreteHandlerOne(out)
    h2 = ConcreteHandlerTwo(out)
    h3 = ConcreteHandlerThree(out)

    h1.set_successor(h2)
    h2.set_successor(h3)

    h1.handle_request(ValueRequest("Negative Value ", -1))
    h1.handle_request(ValueRequest("Zero Value ", 0))
    h1.handle_request(ValueRequest("Positive Value ", 1))
    h1.handle_request(ValueRequest("Positive Value ", 2))
    h1.handle_request(ValueRequest("Negative Value ", -5))
