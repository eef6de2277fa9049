import io
import sys

import pytest

from freightsched.cli import format_assignments, main, menu_text
from freightsched.entities import Cargo, Freight


@pytest.fixture
def data_files(tmp_path):
    cargo_path = tmp_path / "cargo.txt"
    freight_path = tmp_path / "freight.txt"
    cargo_path.write_text("C1,Dock,10:00\nC2,Yard,11:00\n", encoding="utf-8")
    freight_path.write_text("F1,Dock,10:00\n", encoding="utf-8")
    return cargo_path, freight_path, tmp_path / "schedule.csv"


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    code = main([])
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def _header(files, schedule=None):
    cargo_path, freight_path, schedule_path = files
    target = schedule_path if schedule is None else schedule
    return f"{cargo_path}\n{freight_path}\n{target}\n"


def test_menu_text_lists_all_options_and_prompts():
    text = menu_text()
    assert "===== Transportation Management System =====" in text
    assert "1. Display all cargo\n" in text
    assert "14. Exit\n" in text
    assert text.endswith("Enter your choice: ")


def test_format_assignments_empty():
    assert format_assignments([]) == "No assignments found.\n"


def test_format_assignments_table():
    pairs = [(Cargo("C1", "Dock", "10:00"), Freight("F1", "Dock", "10:00"))]
    lines = format_assignments(pairs).splitlines()
    assert lines[1] == "Assignments:"
    assert lines[2].split("  ")[0] == "Cargo ID"
    assert len(lines[2]) == 60
    assert lines[3].split() == ["C1", "F1", "Dock", "10:00"]


def test_missing_cargo_file_fails(monkeypatch, capsys, tmp_path):
    text = f"{tmp_path / 'absent.txt'}\n{tmp_path / 'also.txt'}\n\n"
    code, _, err = _run(monkeypatch, capsys, text)
    assert code == 1
    assert "Failed to load cargo data!" in err


def test_generate_schedule_autosaves(monkeypatch, capsys, data_files):
    code, out, _ = _run(monkeypatch, capsys, _header(data_files) + "9\n14\nn\n")
    assert code == 0
    assert "Schedule generated with 1 assignments" in out
    lines = data_files[2].read_text(encoding="utf-8").splitlines()
    assert lines == ["CargoID,FreightID,Location,Time", "C1,F1,Dock,10:00"]
    assert out.count("Exiting...") == 1


def test_add_cargo_and_save_on_exit(monkeypatch, capsys, data_files):
    text = _header(data_files) + "3\nC9\nPort\n12:00\n14\ny\n1\nn\n"
    code, out, _ = _run(monkeypatch, capsys, text)
    assert code == 0
    assert "Cargo added successfully!" in out
    lines = data_files[0].read_text(encoding="utf-8").splitlines()
    assert lines[-1] == "C9,Port,12:00"
    assert len(lines) == 3


def test_duplicate_freight_is_rejected(monkeypatch, capsys, data_files):
    text = _header(data_files) + "4\nF1\nDock\n10:00\n14\nn\n"
    _, out, _ = _run(monkeypatch, capsys, text)
    assert "Error: Freight with this ID already exists!" in out


def test_delete_missing_cargo(monkeypatch, capsys, data_files):
    text = _header(data_files) + "5\nC404\n14\nn\n"
    _, out, _ = _run(monkeypatch, capsys, text)
    assert "Error: Cargo with this ID not found!" in out


def test_delete_then_listing_omits_entry(monkeypatch, capsys, data_files):
    text = _header(data_files) + "5\nC2\n1\n14\nn\n"
    _, out, _ = _run(monkeypatch, capsys, text)
    assert "Cargo deleted successfully!" in out
    assert "[CARGO]ID: C1, Location: Dock, Time: 10:00" in out
    assert "ID: C2" not in out


def test_edit_with_blank_keeps_current_value(monkeypatch, capsys, data_files):
    text = _header(data_files) + "7\nC1\n\n09:30\n14\ny\n1\nn\n"
    _, out, _ = _run(monkeypatch, capsys, text)
    assert "Cargo edited successfully!" in out
    lines = data_files[0].read_text(encoding="utf-8").splitlines()
    assert lines[0] == "C1,Dock,09:30"


def test_unassigned_cargo_listing(monkeypatch, capsys, data_files):
    text = _header(data_files) + "9\n11\n14\nn\n"
    _, out, _ = _run(monkeypatch, capsys, text)
    section = out.split("Unassigned Cargo:")[1]
    assert "ID: C2, Location: Yard, Time: 11:00" in section
    assert "ID: C1," not in section


def test_display_assignments_before_generation(monkeypatch, capsys, data_files):
    _, out, _ = _run(monkeypatch, capsys, _header(data_files) + "10\n14\nn\n")
    assert "No assignments found." in out


def test_invalid_input_and_choice(monkeypatch, capsys, data_files):
    _, out, _ = _run(monkeypatch, capsys, _header(data_files) + "abc\n99\n14\nn\n")
    assert "Invalid input. Please enter a number." in out
    assert "Invalid choice. Please try again." in out


def test_save_freight_to_new_path(monkeypatch, capsys, data_files, tmp_path):
    target = tmp_path / "copy.txt"
    text = _header(data_files) + f"13\ny\n2\ny\n{target}\n14\nn\n"
    _, out, _ = _run(monkeypatch, capsys, text)
    assert "All selected files saved successfully!" in out
    assert target.read_text(encoding="utf-8") == data_files[1].read_text(encoding="utf-8")


def test_failed_save_can_cancel_exit(monkeypatch, capsys, data_files, tmp_path):
    text = _header(data_files, schedule=tmp_path) + "14\ny\n3\ny\nn\n14\nn\n"
    code, out, _ = _run(monkeypatch, capsys, text)
    assert code == 0
    assert "Failed to save some files. Exit anyway? (y/n): " in out
    assert out.count("Exiting...") == 1


def test_end_of_input_stops_cleanly(monkeypatch, capsys, data_files):
    code, out, _ = _run(monkeypatch, capsys, _header(data_files))
    assert code == 0
    assert "Exiting..." not in out