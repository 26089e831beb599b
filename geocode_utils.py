import logging

from geopy.exc import GeopyError
from geopy.geocoders import Nominatim

import config
from data_utils import Coordinate
from dispatch_errors import GeocodeFailure

logger = logging.getLogger(__name__)

PATIENT_PLACEHOLDER = Coordinate(config.PATIENT_PLACEHOLDER_LAT, config.PATIENT_PLACEHOLDER_LON)


class PlaceholderGeocoder:
    """Stands in for real geocoding: every address maps to one fixed point."""

    def __init__(self, coordinate=PATIENT_PLACEHOLDER):
        self.coordinate = coordinate

    def geocode(self, address):
        return self.coordinate


class NominatimGeocoder:
    """Resolve patient addresses through OpenStreetMap Nominatim."""

    def __init__(self, user_agent=config.NOMINATIM_USER_AGENT, timeout=config.GEOCODER_TIMEOUT, geolocator=None):
        self.geolocator = geolocator or Nominatim(user_agent=user_agent, timeout=timeout)

    def geocode(self, address):
        if not address or not address.strip():
            raise GeocodeFailure("Patient address is empty")

        try:
            location = self.geolocator.geocode(address)
        except GeopyError as e:
            logger.error(f"Geocoding service error for '{address}': {e}")
            raise GeocodeFailure(f"Could not geocode '{address}': {e}") from e

        if location is None:
            raise GeocodeFailure(f"Could not find coordinates for '{address}'")

        logger.debug(f"Geocoded '{address}' to ({location.latitude}, {location.longitude})")
        return Coordinate(location.latitude, location.longitude)


def build_geocoder(name=None):
    """Create the geocoder selected by name, defaulting to the configured one."""
    name = (name or config.GEOCODER).strip().lower()
    if name == "placeholder":
        return PlaceholderGeocoder()
    if name == "nominatim":
        return NominatimGeocoder()
    raise ValueError(f"Unknown geocoder: {name}")
