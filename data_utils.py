import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional, Sequence, Tuple

import pandas as pd

import config
from dispatch_errors import RosterLoadError

logger = logging.getLogger(__name__)

ROSTER_COLUMNS = ["Name", "Address", "Latitude", "Longitude"]


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def __iter__(self) -> Iterator[float]:
        # Unpacks as a (lat, lon) point
        yield self.latitude
        yield self.longitude


@dataclass(frozen=True)
class Location:
    """A named point of interest: a clinician's home base or a lab drop-off."""
    name: str
    address: str
    coordinate: Coordinate


Clinician = Location
Lab = Location


@dataclass(frozen=True)
class DispatchResult:
    clinician_name: str
    total_distance_miles: float
    lab_name: Optional[str] = None
    # Where the patient was resolved to; not part of the match itself
    patient_coordinate: Optional[Coordinate] = field(default=None, compare=False)

    @property
    def loop_description(self) -> str:
        if self.lab_name is None:
            return "Home → Patient → Home"
        return "Home → Patient → Lab → Home"


class RosterSource:
    """Supplies the clinicians and labs the optimizer evaluates."""

    def clinicians(self) -> Sequence[Clinician]:
        raise NotImplementedError

    def labs(self) -> Sequence[Lab]:
        raise NotImplementedError


class StaticRoster(RosterSource):
    def __init__(self, clinicians: Sequence[Clinician], labs: Sequence[Lab] = ()):
        self._clinicians = tuple(clinicians)
        self._labs = tuple(labs)

    def clinicians(self) -> Tuple[Clinician, ...]:
        return self._clinicians

    def labs(self) -> Tuple[Lab, ...]:
        return self._labs


def load_locations(csv_path) -> Tuple[Location, ...]:
    """
    Load locations from a roster CSV file.

    Args:
        csv_path: Path to a CSV with Name, Address, Latitude and Longitude columns

    Returns:
        Tuple of Location records in file order
    """
    try:
        df = pd.read_csv(csv_path, float_precision="round_trip")
    except FileNotFoundError as e:
        raise RosterLoadError(f"Roster file not found: {csv_path}") from e
    except pd.errors.EmptyDataError as e:
        raise RosterLoadError(f"Roster file is empty: {csv_path}") from e

    # Clean column names
    df.columns = df.columns.str.strip()

    missing = [col for col in ROSTER_COLUMNS if col not in df.columns]
    if missing:
        raise RosterLoadError(f"Roster file {csv_path} is missing columns: {', '.join(missing)}")

    # Unparseable coordinates count as missing
    df["Latitude"] = pd.to_numeric(df["Latitude"], errors="coerce")
    df["Longitude"] = pd.to_numeric(df["Longitude"], errors="coerce")
    df["Name"] = df["Name"].fillna("").astype(str).str.strip()

    # Drop rows with missing names or coordinates (essential for distance calculations)
    complete = df[df["Name"] != ""].dropna(subset=["Latitude", "Longitude"])
    dropped = len(df) - len(complete)
    if dropped:
        logger.warning(f"Dropped {dropped} row(s) without a name or valid coordinates from {csv_path}")

    locations = tuple(
        Location(
            name=row.Name,
            address="" if pd.isna(row.Address) else str(row.Address).strip(),
            coordinate=Coordinate(float(row.Latitude), float(row.Longitude)),
        )
        for row in complete.itertuples(index=False)
    )
    logger.debug(f"Loaded {len(locations)} location(s) from {csv_path}")
    return locations


class CsvRoster(RosterSource):
    """Roster read from clinician and lab CSV files, loaded once on first use."""

    def __init__(self, clinicians_path, labs_path):
        self.clinicians_path = clinicians_path
        self.labs_path = labs_path
        self._clinicians = None
        self._labs = None

    def clinicians(self) -> Tuple[Clinician, ...]:
        if self._clinicians is None:
            self._clinicians = load_locations(self.clinicians_path)
        return self._clinicians

    def labs(self) -> Tuple[Lab, ...]:
        if self._labs is None:
            self._labs = load_locations(self.labs_path)
        return self._labs


def default_roster() -> CsvRoster:
    return CsvRoster(config.CLINICIANS_CSV, config.LABS_CSV)


def location_by_name(locations: Sequence[Location], name: str) -> Location:
    for location in locations:
        if location.name == name:
            return location
    raise KeyError(name)
