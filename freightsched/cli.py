"""Interactive menu for managing cargo, freight and their schedule."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence

from freightsched.entities import Cargo, Freight, TransportEntity
from freightsched.registry import CargoList, EntityList, FreightList, StorageError
from freightsched.scheduler import Assignment, Scheduler

_COLUMN_WIDTH = 15

_MENU_ITEMS = (
    "Display all cargo",
    "Display all freight",
    "Add new cargo",
    "Add new freight",
    "Delete cargo",
    "Delete freight",
    "Edit cargo",
    "Edit freight",
    "Generate schedule",
    "Display assignments",
    "Display unassigned cargo",
    "Display unassigned freight",
    "Save current data",
    "Exit",
)


def menu_text() -> str:
    """Return the main menu followed by the choice prompt."""
    lines = ["", "===== Transportation Management System ====="]
    lines.extend(f"{number}. {item}" for number, item in enumerate(_MENU_ITEMS, start=1))
    return "\n".join(lines) + "\nEnter your choice: "


def format_assignments(assignments: Sequence[tuple[Cargo, Freight]]) -> str:
    """Render cargo/freight pairs as a fixed-width table."""
    if not assignments:
        return "No assignments found.\n"

    def row(*cells: str) -> str:
        return "".join(cell.ljust(_COLUMN_WIDTH) for cell in cells) + "\n"

    text = "\nAssignments:\n" + row("Cargo ID", "Freight ID", "Location", "Time")
    for cargo, freight in assignments:
        text += row(cargo.id, freight.id, cargo.location, cargo.time)
    return text


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _read_line() -> str:
    """Read one whole line; an exhausted input gives an empty string."""
    return sys.stdin.readline().rstrip("\r\n")


def _read_token() -> str:
    """Read the first word, skipping blank lines and discarding the rest of its line."""
    while True:
        line = sys.stdin.readline()
        if not line:
            raise EOFError
        tokens = line.split()
        if tokens:
            return tokens[0]


def _ask(prompt: str) -> str:
    _write(prompt)
    return _read_line()


def _ask_yes(prompt: str) -> bool:
    _write(prompt)
    return _read_token()[0].lower() == "y"


def _ask_int(prompt: str) -> int | None:
    _write(prompt)
    try:
        return int(_read_token())
    except ValueError:
        return None


def _try_save(save: Callable[[str | None], None], path: str) -> bool:
    try:
        save(path or None)
    except StorageError as error:
        print(error, file=sys.stderr)
        return False
    return True


def _find(entities: EntityList, entity_id: str) -> TransportEntity | None:
    return next((entity for entity in entities if entity.id == entity_id), None)


class _Session:
    """State and actions of one interactive run."""

    def __init__(self, cargo: CargoList, freight: FreightList, schedule_path: str) -> None:
        self.cargo = cargo
        self.freight = freight
        self.schedule_path = schedule_path
        self.scheduler = Scheduler(Assignment(cargo, freight))
        self.actions: dict[int, Callable[[], None]] = {
            1: lambda: self._show_all("Cargo", self.cargo),
            2: lambda: self._show_all("Freight", self.freight),
            3: lambda: self._add("Cargo", self.cargo, Cargo),
            4: lambda: self._add("Freight", self.freight, Freight),
            5: lambda: self._delete("Cargo", self.cargo),
            6: lambda: self._delete("Freight", self.freight),
            7: lambda: self._edit("Cargo", self.cargo),
            8: lambda: self._edit("Freight", self.freight),
            9: self._generate,
            10: lambda: _write(format_assignments(self.scheduler.assignment.pairs)),
            11: lambda: self._show_unassigned("Cargo", self.scheduler.unassigned_cargo()),
            12: lambda: self._show_unassigned("Freight", self.scheduler.unassigned_freight()),
            13: self._save_current,
        }

    def run(self) -> None:
        while True:
            _write(menu_text())
            token = _read_token()
            try:
                choice = int(token)
            except ValueError:
                _write("Invalid input. Please enter a number.\n")
                continue
            if choice == 14:
                if self._confirm_exit():
                    _write("Exiting...\n")
                    return
                continue
            action = self.actions.get(choice)
            if action is None:
                _write("Invalid choice. Please try again.\n")
            else:
                action()

    def _show_all(self, kind: str, entities: EntityList) -> None:
        _write(f"\n--- {kind} List ---\n")
        for entity in entities:
            _write(entity.details() + "\n")

    def _add(self, kind: str, entities: EntityList, factory: type) -> None:
        entity_id = _ask(f"Enter {kind} ID: ")
        location = _ask("Enter Location: ")
        time = _ask("Enter Time: ")
        try:
            entities.add(factory(entity_id, location, time))
        except ValueError:
            _write(f"Error: {kind} with this ID already exists!\n")
        else:
            _write(f"{kind} added successfully!\n")

    def _delete(self, kind: str, entities: EntityList) -> None:
        entity_id = _ask(f"Enter {kind} ID to delete: ")
        try:
            entities.delete(entity_id)
        except KeyError:
            _write(f"Error: {kind} with this ID not found!\n")
        else:
            _write(f"{kind} deleted successfully!\n")

    def _edit(self, kind: str, entities: EntityList) -> None:
        entity_id = _ask(f"Enter {kind} ID to edit: ")
        location = _ask("Enter new Location (leave blank to keep current): ")
        time = _ask("Enter new Time (leave blank to keep current): ")
        current = _find(entities, entity_id)
        if current is None:
            _write(f"Error: {kind} with this ID not found!\n")
            return
        entities.edit(entity_id, location or current.location, time or current.time)
        _write(f"{kind} edited successfully!\n")

    def _generate(self) -> None:
        _write("Generating schedule...\n")
        self.scheduler.generate_schedule()
        count = len(self.scheduler.assignment.pairs)
        _write(f"Schedule generated with {count} assignments\n")
        if not self.schedule_path:
            return
        if _try_save(self.scheduler.save, self.schedule_path):
            _write(f"Assignments automatically saved to: {self.schedule_path}\n")
        else:
            _write(f"Warning: Failed to save assignments to {self.schedule_path}\n")

    def _show_unassigned(self, kind: str, entities: list[TransportEntity]) -> None:
        _write(f"\nUnassigned {kind}:\n")
        for entity in entities:
            _write(f"ID: {entity.id}, Location: {entity.location}, Time: {entity.time}\n")

    def _save_current(self) -> None:
        if self._prompt_save():
            _write("All selected files saved successfully!\n")
        else:
            _write("Some files failed to save!\n")

    def _confirm_exit(self) -> bool:
        if self._prompt_save():
            return True
        _write("Failed to save some files. Exit anyway? (y/n): ")
        return _read_token()[0].lower() != "n"

    def _prompt_save(self) -> bool:
        if not _ask_yes("Would you like to save before exiting? (y/n): "):
            return True
        _write(
            "\nWhat would you like to save?\n"
            "1. Cargo data\n"
            "2. Freight data\n"
            "3. Schedule/assignments\n"
            "4. All of the above\n"
        )
        choice = _ask_int("Enter choice: ")
        success = True
        if choice in (1, 4):
            path = _ask("Enter new path: ") if _ask_yes("Save cargo to new path? (y/n): ") else ""
            success &= _try_save(self.cargo.save, path)
        if choice in (2, 4):
            path = _ask("Enter new path: ") if _ask_yes("Save freight to new path? (y/n): ") else ""
            success &= _try_save(self.freight.save, path)
        if choice in (3, 4):
            if _ask_yes(f"Save schedule to path [{self.schedule_path}]? (y/n): "):
                path = self.schedule_path
            else:
                path = _ask("Enter new path: ")
            success &= _try_save(self.scheduler.save, path)
        return success


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive transportation management menu."""
    parser = argparse.ArgumentParser(
        prog="freightsched",
        description="Interactively manage cargo and freight and schedule their pairing.",
    )
    parser.parse_args(argv)

    cargo_path = _ask("Enter path to cargo data file: ")
    freight_path = _ask("Enter path to freight data file: ")
    schedule_path = _ask(
        "Enter path for scheduler output file "
        "(Please include scheduler.txt or .csv at the end): "
    )

    cargo, freight = CargoList(), FreightList()
    for entities, path, kind in ((cargo, cargo_path, "cargo"), (freight, freight_path, "freight")):
        try:
            entities.load(path)
        except StorageError as error:
            print(error, file=sys.stderr)
            print(f"Failed to load {kind} data!", file=sys.stderr)
            return 1

    try:
        _Session(cargo, freight, schedule_path).run()
    except EOFError:
        _write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())