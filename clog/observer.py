"""A minimal observer pattern: subjects notify attached observers of events."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Generic, Iterator, TextIO, TypeVar


class Observer(ABC):
    """Something that wants to hear about a subject's events."""

    @abstractmethod
    def update(self) -> None:
        """React to a notification from a subject."""


ObserverT = TypeVar("ObserverT", bound=Observer)


class Subject(Generic[ObserverT]):
    """Keeps an ordered list of observers and notifies them on request."""

    def __init__(self) -> None:
        self._observers: list[ObserverT] = []

    def __len__(self) -> int:
        return len(self._observers)

    def __iter__(self) -> Iterator[ObserverT]:
        return iter(self._observers)

    @property
    def observers(self) -> tuple[ObserverT, ...]:
        """The attached observers, in attachment order."""
        return tuple(self._observers)

    def attach(self, observer: ObserverT) -> None:
        """Add an observer to the end of the notification list."""
        self._observers.append(observer)

    def detach(self, observer: ObserverT) -> None:
        """Remove the first observer equal to ``observer``; do nothing if none is."""
        try:
            self._observers.remove(observer)
        except ValueError:
            pass

    def notify_observers(self) -> None:
        """Call ``update`` on every attached observer, in attachment order."""
        for observer in self._observers:
            observer.update()


@dataclass
class ConcreteObserver(Observer):
    """An observer that counts the events it receives and reports each one.

    Reports go to ``stream``, or to standard output when no stream is given.
    Observers compare equal by ``id`` alone.
    """

    id: int
    received: int = field(default=0, compare=False)
    stream: TextIO | None = field(default=None, compare=False, repr=False)

    def update(self) -> None:
        self.received += 1
        out = self.stream if self.stream is not None else sys.stdout
        out.write(f"Observer id:{self.id} received event!\n")


def run_main() -> None:
    """Attach two observers, notify, detach one, and notify again."""
    subject: Subject[ConcreteObserver] = Subject()
    observer_a = ConcreteObserver(id=1)
    observer_b = ConcreteObserver(id=2)

    subject.attach(observer_a)
    subject.attach(observer_b)
    subject.notify_observers()

    subject.detach(observer_b)
    subject.notify_observers()


def main(argv: list[str] | None = None) -> int:
    """Command entry point: run the demonstration."""
    if argv is None:
        argv = sys.argv[1:]
    run_main()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())