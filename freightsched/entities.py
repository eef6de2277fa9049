"""Transport entities: cargo to be moved and freight that moves it."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class TransportEntity:
    """Something identified by an id that sits at a location at a given time."""

    id: str
    location: str
    time: str

    label: ClassVar[str] = ""

    def details(self) -> str:
        """Return a one-line human readable description."""
        prefix = f"[{self.label}]" if self.label else ""
        return f"{prefix}ID: {self.id}, Location: {self.location}, Time: {self.time}"

    def __str__(self) -> str:
        return self.details()


@dataclass
class Cargo(TransportEntity):
    """A load waiting to be transported."""

    label: ClassVar[str] = "CARGO"


@dataclass
class Freight(TransportEntity):
    """A carrier able to take cargo."""

    label: ClassVar[str] = "FREIGHT"