"""Pairing cargo with freight that is at the same place at the same time."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from freightsched.entities import Cargo, Freight
from freightsched.registry import CargoList, FreightList, StorageError


@dataclass
class Assignment:
    """The cargo and freight being scheduled, with the pairs made so far."""

    cargo: CargoList
    freight: FreightList
    pairs: list[tuple[Cargo, Freight]] = field(default_factory=list)


class Scheduler:
    """Builds and keeps the pairs of an Assignment."""

    def __init__(self, assignment: Assignment) -> None:
        self.assignment = assignment
        self.path: str = ""

    def generate_schedule(self) -> None:
        """Pair every cargo with every freight sharing its location and time."""
        self.assignment.pairs = [
            (cargo, freight)
            for cargo in self.assignment.cargo
            for freight in self.assignment.freight
            if cargo.location == freight.location and cargo.time == freight.time
        ]

    def add_pairing(self, cargo: Cargo, freight: Freight) -> None:
        """Pair cargo with freight; raise ValueError if either is already paired."""
        if self.is_cargo_assigned(cargo) or self.is_freight_assigned(freight):
            raise ValueError("cargo or freight is already assigned")
        self.assignment.pairs.append((cargo, freight))

    def clear_assignments(self) -> None:
        """Drop all pairs."""
        self.assignment.pairs.clear()

    def is_cargo_assigned(self, cargo: Cargo) -> bool:
        """Whether this very cargo object appears in a pair."""
        return any(paired is cargo for paired, _ in self.assignment.pairs)

    def is_freight_assigned(self, freight: Freight) -> bool:
        """Whether this very freight object appears in a pair."""
        return any(paired is freight for _, paired in self.assignment.pairs)

    def unassigned_cargo(self) -> list[Cargo]:
        """Cargo that is in no pair, in list order."""
        return [c for c in self.assignment.cargo if not self.is_cargo_assigned(c)]

    def unassigned_freight(self) -> list[Freight]:
        """Freight that is in no pair, in list order."""
        return [f for f in self.assignment.freight if not self.is_freight_assigned(f)]

    def save(self, path: str | Path | None = None) -> None:
        """Write the pairs as CSV to path, or to the remembered path if none is given."""
        if path:
            self.path = str(path)
        if not self.path:
            raise StorageError("No file path specified!")
        try:
            with open(self.path, "w", encoding="utf-8") as target:
                if not self.assignment.pairs:
                    target.write("No assignments exist.\n")
                    return
                target.write("CargoID,FreightID,Location,Time\n")
                for cargo, freight in self.assignment.pairs:
                    target.write(f"{cargo.id},{freight.id},{cargo.location},{cargo.time}\n")
        except OSError as error:
            raise StorageError(f"Error saving file: {self.path}") from error