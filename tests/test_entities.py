from freightsched.entities import Cargo, Freight, TransportEntity


def test_cargo_details_has_cargo_prefix():
    cargo = Cargo("C1", "Dock", "10:00")
    assert cargo.details() == "[CARGO]ID: C1, Location: Dock, Time: 10:00"


def test_freight_details_has_freight_prefix():
    freight = Freight("F1", "Yard", "12:30")
    assert freight.details() == "[FREIGHT]ID: F1, Location: Yard, Time: 12:30"


def test_base_entity_details_has_no_prefix():
    entity = TransportEntity("X", "Here", "now")
    assert entity.details() == "ID: X, Location: Here, Time: now"


def test_str_matches_details():
    cargo = Cargo("C2", "Port", "09:00")
    assert str(cargo) == cargo.details()


def test_fields_are_mutable():
    freight = Freight("F2", "A", "1")
    freight.location = "B"
    freight.time = "2"
    assert (freight.id, freight.location, freight.time) == ("F2", "B", "2")