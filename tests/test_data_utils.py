import pytest

from data_utils import Coordinate, CsvRoster, DispatchResult, StaticRoster, default_roster, load_locations, location_by_name
from dispatch_errors import RosterLoadError

from conftest import make_location


def write_csv(path, text):
    path.write_text(text)
    return path


def test_default_roster_loads_bundled_data():
    roster = default_roster()
    assert [c.name for c in roster.clinicians()] == ["Barb", "Isaac", "Marisol", "Mary", "Shawna", "Shelly", "Tom"]
    assert len(roster.labs()) == 5
    assert roster.clinicians()[0].coordinate == Coordinate(44.928, -93.281)


def test_csv_roster_keeps_file_order_and_drops_rows_without_coordinates(tmp_path):
    clinicians = write_csv(tmp_path / "clinicians.csv", (
        "Name,Address,Latitude,Longitude\n"
        "Zed,1 First St,44.9,-93.2\n"
        "Amy,2 Second St,,\n"
        "Bea,3 Third St,45.0,-93.1\n"
    ))
    labs = write_csv(tmp_path / "labs.csv", "Name,Address,Latitude,Longitude\nLab,9 Lab Rd,44.8,-93.3\n")

    roster = CsvRoster(clinicians, labs)

    assert [c.name for c in roster.clinicians()] == ["Zed", "Bea"]
    assert roster.labs()[0].address == "9 Lab Rd"
    # Loaded once
    assert roster.clinicians() is roster.clinicians()


def test_csv_columns_are_stripped(tmp_path):
    path = write_csv(tmp_path / "c.csv", "Name , Address , Latitude , Longitude\nAl,,44.9,-93.2\n")
    locations = load_locations(path)
    assert locations[0] == make_location("Al", 44.9, -93.2)


def test_missing_roster_file_raises(tmp_path):
    with pytest.raises(RosterLoadError):
        load_locations(tmp_path / "missing.csv")


def test_missing_columns_raise(tmp_path):
    path = write_csv(tmp_path / "c.csv", "Name,Address\nAl,1 First St\n")
    with pytest.raises(RosterLoadError, match="Latitude"):
        load_locations(path)


def test_static_roster_is_read_only_copy():
    clinicians = [make_location("Barb", 44.928, -93.281)]
    roster = StaticRoster(clinicians)
    clinicians.append(make_location("Tom", 44.74, -93.21))

    assert len(roster.clinicians()) == 1
    assert roster.labs() == ()


def test_coordinate_unpacks_as_point():
    lat, lon = Coordinate(44.9778, -93.2650)
    assert (lat, lon) == (44.9778, -93.2650)


def test_location_by_name():
    locations = [make_location("Barb", 44.928, -93.281), make_location("Tom", 44.74, -93.21)]
    assert location_by_name(locations, "Tom").name == "Tom"
    with pytest.raises(KeyError):
        location_by_name(locations, "Nobody")


def test_loop_description():
    assert DispatchResult("Barb", 7.0).loop_description == "Home → Patient → Home"
    assert DispatchResult("Barb", 9.1, "Edina Lab").loop_description == "Home → Patient → Lab → Home"


def test_rows_with_bad_coordinates_or_no_name_are_dropped(tmp_path):
    path = write_csv(tmp_path / "c.csv", (
        "Name,Address,Latitude,Longitude\n"
        "Barb,4120 Garfield Ave,44.928,-93.281\n"
        "Isaac,140 104th Ln NW,unknown,-93.2741\n"
        ",608 Spruce Dr,44.9631,-92.7368\n"
        "  ,1232 3rd St,44.9861,-92.7519\n"
        "Tom,14173 Flagstone Trail,44.7439,n/a\n"
    ))

    locations = load_locations(path)

    (barb,) = locations
    assert (barb.name, barb.address) == ("Barb", "4120 Garfield Ave")
    assert tuple(barb.coordinate) == pytest.approx((44.928, -93.281))
