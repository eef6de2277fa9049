"""Collections of transport entities backed by comma separated text files."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar, Generic, Iterator, TypeVar

from freightsched.entities import Cargo, Freight, TransportEntity

E = TypeVar("E", bound=TransportEntity)


class StorageError(Exception):
    """Raised when a list cannot be read from or written to disk."""


def _parse_line(line: str) -> tuple[str, str, str] | None:
    """Split a record line into id, location and time, or None if it is short."""
    parts = line.split(",")
    if len(parts) < 3 or (len(parts) == 3 and parts[2] == ""):
        return None
    return parts[0], parts[1], parts[2]


class EntityList(Generic[E]):
    """An ordered collection of entities with unique ids."""

    entity_type: ClassVar[type] = TransportEntity

    def __init__(self) -> None:
        self._entities: list[E] = []
        self.path: str = ""

    def __iter__(self) -> Iterator[E]:
        return iter(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def _position(self, entity_id: str) -> int:
        for position, entity in enumerate(self._entities):
            if entity.id == entity_id:
                return position
        raise KeyError(entity_id)

    def add(self, entity: E) -> None:
        """Append an entity; raise ValueError if its id is already present."""
        if any(existing.id == entity.id for existing in self._entities):
            raise ValueError(f"an entry with id {entity.id!r} already exists")
        self._entities.append(entity)

    def delete(self, entity_id: str) -> None:
        """Remove the first entity with this id; raise KeyError if none."""
        for position, entity in enumerate(self._entities):
            if entity.id == entity_id:
                self._entities.pop(position)
                return
        raise KeyError(entity_id)

    def edit(self, entity_id: str, location: str, time: str) -> None:
        """Replace location and time of the entity with this id; raise KeyError if none."""
        entity = self._entities[self._position(entity_id)]
        entity.location = location
        entity.time = time

    def load(self, path: str | Path) -> None:
        """Append the records read from a file and remember its path."""
        try:
            with open(path, encoding="utf-8") as source:
                for line in source:
                    fields = _parse_line(line.removesuffix("\n"))
                    if fields is not None:
                        self._entities.append(self.entity_type(*fields))
        except OSError as error:
            raise StorageError(f"Error opening file: {path}") from error
        self.path = str(path)

    def save(self, path: str | Path | None = None) -> None:
        """Write all records to path, or to the remembered path if none is given."""
        if path:
            self.path = str(path)
        if not self.path:
            raise StorageError("No file path specified!")
        try:
            with open(self.path, "w", encoding="utf-8") as target:
                for entity in self._entities:
                    target.write(f"{entity.id},{entity.location},{entity.time}\n")
        except OSError as error:
            raise StorageError(f"Error saving file: {self.path}") from error


class CargoList(EntityList[Cargo]):
    """The cargo waiting to be scheduled."""

    entity_type: ClassVar[type] = Cargo


class FreightList(EntityList[Freight]):
    """The freight available to carry cargo."""

    entity_type: ClassVar[type] = Freight