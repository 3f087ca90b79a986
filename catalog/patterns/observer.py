"""
Observer examples.

Define a one-to-many dependency between objects so that when one object
changes state, all its dependents are notified and updated automatically.
"""

# pylint: disable=too-few-public-methods, unused-argument

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, List, Optional

from catalog.entropy import EntropySource
from catalog.example import Category, Transcript, example


# --- Store inventory ---


class InventoryObserver:
    def __init__(self, out: Transcript, name: str) -> None:
        self.out = out
        self.name = name

    def update(self) -> None:
        self.out.write(f"{self.name}: A new product has arrived at the store")


class Inventory:
    """Subject that notifies observers whenever its stock grows."""

    def __init__(self) -> None:
        self._observers: List[InventoryObserver] = []
        self._count = 0

    def subscribe(self, observer: InventoryObserver) -> None:
        self._observers.append(observer)

    def unsubscribe(self, observer: InventoryObserver) -> None:
        self._observers.remove(observer)

    @property
    def count(self) -> int:
        return self._count

    @count.setter
    def count(self, value: int) -> None:
        if value > self._count:
            self._notify()
        self._count = value

    def _notify(self) -> None:
        for observer in self._observers:
            observer.update()


@example("observer/store-inventory", Category.BEHAVIORAL, title="Store inventory")
def store_inventory(out: Transcript, entropy: EntropySource) -> None:
    """Shoppers are told when new stock arrives, for as long as they are subscribed."""
    inventory = Inventory()
    observer1 = InventoryObserver(out, "Observer 1")
    observer2 = InventoryObserver(out, "Observer 2")
    observer3 = InventoryObserver(out, "Observer 3")

    inventory.subscribe(observer1)
    inventory.subscribe(observer2)
    inventory.count += 1
    out.write()

    inventory.unsubscribe(observer1)
    inventory.subscribe(observer3)
    inventory.count += 1
    out.write()

    inventory.count += 1


# --- Baggage claim ---


@dataclass(frozen=True)
class BaggageInfo:
    flight: int
    origin: str
    carousel: int


class BaggageObserver(ABC):
    """Receives push notifications from an ArrivalsHandler."""

    @abstractmethod
    def on_next(self, info: BaggageInfo) -> None: ...

    @abstractmethod
    def on_completed(self) -> None: ...


class Subscription:
    """Handle returned by subscribe(); dispose() detaches the observer."""

    def __init__(self, observers: List[BaggageObserver], observer: BaggageObserver) -> None:
        self._observers = observers
        self._observer = observer

    def dispose(self) -> None:
        if self._observer in self._observers:
            self._observers.remove(self._observer)


class ArrivalsHandler:
    """Provider of baggage claim information for arriving flights."""

    def __init__(self) -> None:
        self._observers: List[BaggageObserver] = []
        self._flights: List[BaggageInfo] = []

    def subscribe(self, observer: BaggageObserver) -> Subscription:
        """Attach an observer and replay every flight already on a carousel."""
        if observer not in self._observers:
            self._observers.append(observer)
            for info in list(self._flights):
                observer.on_next(info)
        return Subscription(self._observers, observer)

    def baggage_status(self, flight: int, origin: str = "", carousel: int = 0) -> None:
        """Post a flight to a carousel, or clear it when carousel is 0."""
        info = BaggageInfo(flight, origin, carousel)

        if carousel > 0 and info not in self._flights:
            self._flights.append(info)
            for observer in self._observers:
                observer.on_next(info)
        elif carousel == 0:
            cleared = [f for f in self._flights if f.flight == info.flight]
            for _ in cleared:
                for observer in self._observers:
                    observer.on_next(info)
            for f in cleared:
                self._flights.remove(f)

    def last_baggage_claimed(self) -> None:
        for observer in list(self._observers):
            observer.on_completed()
        self._observers.clear()


class ArrivalsMonitor(BaggageObserver):
    """Displays the sorted arrivals board every time it changes."""

    def __init__(self, out: Transcript, name: str) -> None:
        self.out = out
        self.name = name
        self._lines: List[str] = []
        self._subscription: Optional[Subscription] = None

    def subscribe(self, provider: ArrivalsHandler) -> None:
        self._subscription = provider.subscribe(self)

    def unsubscribe(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
        self._lines.clear()

    def on_completed(self) -> None:
        self._lines.clear()

    def on_next(self, info: BaggageInfo) -> None:
        updated = False
        flight_field = f"{info.flight:>5}"

        if info.carousel == 0:
            remaining = [line for line in self._lines if line[21:26] != flight_field]
            updated = len(remaining) != len(self._lines)
            self._lines = remaining
        else:
            line = f"{info.origin:<20} {flight_field}  {info.carousel:>3}"
            if line not in self._lines:
                self._lines.append(line)
                updated = True

        if updated:
            self._lines.sort()
            self.out.write(f"Arrivals information from {self.name}")
            for line in self._lines:
                self.out.write(line)
            self.out.write()


@example("observer/baggage-claim", Category.BEHAVIORAL, title="Baggage claim")
def baggage_claim(out: Transcript, entropy: EntropySource) -> None:
    """Airport monitors follow which carousel each arriving flight uses."""
    provider = ArrivalsHandler()
    observer1 = ArrivalsMonitor(out, "BaggageClaimMonitor1")
    observer2 = ArrivalsMonitor(out, "SecurityExit")

    provider.baggage_status(712, "Detroit", 3)
    observer1.subscribe(provider)
    provider.baggage_status(712, "Kalamazoo", 3)
    provider.baggage_status(400, "New York-Kennedy", 1)
    provider.baggage_status(712, "Detroit", 3)
    observer2.subscribe(provider)
    provider.baggage_status(511, "San Francisco", 2)
    provider.baggage_status(712)
    observer2.unsubscribe()
    provider.baggage_status(400)
    provider.last_baggage_claimed()


# --- Stock investors ---


class Stock(ABC):
    """Subject whose price changes are pushed to attached investors."""

    def __init__(self, symbol: str, price: float) -> None:
        self.symbol = symbol
        self._price = price
        self._investors: List["Investor"] = []

    def attach(self, investor: "Investor") -> None:
        self._investors.append(investor)

    def detach(self, investor: "Investor") -> None:
        self._investors.remove(investor)

    @property
    def price(self) -> float:
        return self._price

    @price.setter
    def price(self, value: float) -> None:
        if self._price != value:
            self._price = value
            self.notify()

    @abstractmethod
    def notify(self) -> None:
        """Tell every investor about the current price."""


class IBM(Stock):
    def __init__(self, out: Transcript, price: float) -> None:
        super().__init__("IBM", price)
        self.out = out

    def notify(self) -> None:
        for investor in self._investors:
            investor.update(self)
        self.out.write()


class Investor:
    def __init__(self, out: Transcript, name: str) -> None:
        self.out = out
        self.name = name

    def update(self, stock: Stock) -> None:
        self.out.write(f"Notified {self.name} of {stock.symbol}'s change to ${stock.price:,.2f}")


@example("observer/stock-investors", Category.BEHAVIORAL, title="Stock investors")
def stock_investors(out: Transcript, entropy: EntropySource) -> None:
    """Investors attached to a stock hear about each price change."""
    ibm = IBM(out, 120.00)
    ibm.attach(Investor(out, "Sorros"))
    ibm.attach(Investor(out, "Berkshire"))

    for price in (120.10, 121.00, 120.50, 120.75):
        ibm.price = price


# --- Shop prices ---


class Shop:
    def __init__(self, out: Transcript, name: str) -> None:
        self.out = out
        self.name = name

    def update(self, price: float) -> None:
        self.out.write(f"Price at {self.name} is now {price:g}")


class Product:
    """Subject offering two ways to subscribe.

    Observer objects are attached to a list and notified through update();
    callbacks are plain callables added to an event list. Observers are
    always notified before callbacks.
    """

    def __init__(self) -> None:
        self._observers: List[Shop] = []
        self._callbacks: List[Callable[[float], None]] = []
        self.price = 0.0

    def attach(self, observer: Shop) -> None:
        self._observers.append(observer)

    def detach(self, observer: Shop) -> None:
        self._observers.remove(observer)

    def add_callback(self, callback: Callable[[float], None]) -> None:
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[float], None]) -> None:
        self._callbacks.remove(callback)

    def change_price(self, price: float) -> None:
        self.price = price
        for observer in self._observers:
            observer.update(price)
        for callback in self._callbacks:
            callback(price)


@example("observer/shop-prices", Category.BEHAVIORAL, title="Shop prices")
def shop_prices(out: Transcript, entropy: EntropySource) -> None:
    """Shops track a product price through observer objects and plain callbacks."""
    product = Product()
    shops = {number: Shop(out, f"Shop {number}") for number in range(1, 7)}

    product.attach(shops[1])
    product.attach(shops[2])
    product.add_callback(shops[3].update)
    product.add_callback(shops[4].update)

    product.change_price(10)
    out.write()

    product.detach(shops[2])
    product.remove_callback(shops[4].update)
    product.change_price(16)
    out.write()

    product.attach(shops[5])
    product.add_callback(shops[6].update)
    product.change_price(25)
