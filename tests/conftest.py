import pytest

from data_utils import Coordinate, Location, StaticRoster
from geocode_utils import PlaceholderGeocoder

PATIENT = Coordinate(44.9778, -93.2650)


def make_location(name, lat, lon, address=""):
    return Location(name=name, address=address, coordinate=Coordinate(lat, lon))


@pytest.fixture
def patient():
    return PATIENT


@pytest.fixture
def placeholder_geocoder():
    return PlaceholderGeocoder(PATIENT)


@pytest.fixture
def twin_cities_roster():
    clinicians = [
        make_location("Barb", 44.928, -93.281, "4120 Garfield Ave, Minneapolis, MN 55409"),
        make_location("Shawna", 44.9168, -93.1772, "1727 W Highland Pkwy, St Paul, MN 55116"),
        make_location("Mary", 44.9631, -92.7368, "608 Spruce Dr, Hudson, WI 54016"),
    ]
    labs = [
        make_location("Edina Lab", 44.8838, -93.3292, "6525 France Ave, Edina, MN, 55435"),
        make_location("Medical Arts Lab", 44.9752, -93.2728, "835 Nicollet Mall, Minneapolis, MN 55402"),
        make_location("Hudson Lab", 44.9718, -92.7561, "400 2nd St S, Hudson, WI 54016"),
    ]
    return StaticRoster(clinicians, labs)
