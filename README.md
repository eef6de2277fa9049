# freightsched

A small tool for matching cargo to freight. Cargo and freight are each kept
in a plain text file with one record per line:

```
ID,Location,Time
```

A cargo item and a freight slot are paired when both their location and
their time are the same. Every matching combination becomes a pair, so one
cargo item can be paired with several freight slots and the reverse.

When a data file is loaded, lines with fewer than three comma separated
fields are skipped and fields after the third are ignored. The records are
added to whatever the list already holds.

## Installing

```
pip install .
```

## Running

```
freightsched
```

The command takes no options apart from `--help`. When it starts, it asks
for three paths:

1. the cargo data file,
2. the freight data file,
3. the file that receives the generated schedule (for example
   `scheduler.csv`).

If either data file cannot be read, the program reports it and exits with
status 1.

After that a numbered menu lets you:

1. list all cargo,
2. list all freight,
3. add cargo,
4. add freight,
5. delete cargo,
6. delete freight,
7. edit cargo,
8. edit freight. A blank location or time keeps the current value.
9. generate a schedule. If a schedule path was given, the schedule is saved
   to it straight away.
10. show the assignments as a table,
11. show the cargo that is in no pair,
12. show the freight that is in no pair,
13. save the cargo, freight or schedule data, either to the paths they came
    from or to new ones,
14. exit. The program offers to save first; if a save fails, it asks whether
    to exit anyway.

IDs must be unique within each list; adding a duplicate is refused. Reaching
the end of the input ends the program.

## Data file format

Saved cargo and freight files use the same one-record-per-line format they
are read from:

```
C1,Sydney,0900
```

## Schedule file format

A saved schedule starts with a header line, then has one line per pairing:

```
CargoID,FreightID,Location,Time
C1,F7,Sydney,0900
```

If there are no assignments, the file holds the line
`No assignments exist.` instead.

## Using it as a library

```python
from freightsched.entities import Cargo, Freight
from freightsched.registry import CargoList, FreightList
from freightsched.scheduler import Assignment, Scheduler

cargo = CargoList()
cargo.add(Cargo("C1", "Sydney", "0900"))
freight = FreightList()
freight.add(Freight("F1", "Sydney", "0900"))

scheduler = Scheduler(Assignment(cargo, freight))
scheduler.generate_schedule()
print(scheduler.assignment.pairs)
scheduler.save("schedule.csv")
```

- `freightsched.entities`: `Cargo` and `Freight` dataclasses with `id`,
  `location` and `time`; `details()` gives a one-line description.
- `freightsched.registry`: `CargoList` and `FreightList`, iterable and
  sized, with `add`, `delete`, `edit`, `load` and `save`. `add` raises
  `ValueError` for a duplicate id; `delete` and `edit` raise `KeyError` for
  an unknown id. `save()` with no path writes to the path last loaded from or
  saved to.
- `freightsched.scheduler`: `Scheduler` with `generate_schedule`,
  `add_pairing` (raises `ValueError` if the cargo or freight is already
  paired), `clear_assignments`, `is_cargo_assigned`, `is_freight_assigned`,
  `unassigned_cargo`, `unassigned_freight` and `save`. Assignment checks
  compare the objects themselves, not their ids.
- `freightsched.cli`: `main`, `menu_text` and `format_assignments`.

A failed load or save raises `freightsched.registry.StorageError`.

## What it does not do

A saved schedule is only written, never read back: each run starts with no
assignments until a schedule is generated.

## Tests

```
pip install .[test]
pytest
```