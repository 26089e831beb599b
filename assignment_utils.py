import logging

from data_utils import Coordinate, DispatchResult, default_roster
from dispatch_errors import NoClinicianAvailable, NoLabAvailable
from geocode_utils import PlaceholderGeocoder
from route_utils import calculate_distance, round_miles

logger = logging.getLogger(__name__)


def evaluate_clinician(clinician, patient_coords, requires_lab, lab_distances=()):
    """
    Find the shortest loop for a single clinician.

    Args:
        clinician: Clinician location
        patient_coords: (latitude, longitude) of the patient
        requires_lab: Whether the loop must pass through a lab drop-off
        lab_distances: (lab, patient-to-lab miles) pairs, required when requires_lab is set

    Returns:
        Tuple of (total miles rounded to 0.1, chosen lab or None)
    """
    home_to_patient = calculate_distance(clinician.coordinate, patient_coords)

    if not requires_lab:
        # Home -> Patient -> Home
        return round_miles(home_to_patient * 2), None

    if not lab_distances:
        raise NoLabAvailable("Lab drop-off required but no labs are available.")

    best_total = None
    best_lab = None
    for lab, patient_to_lab in lab_distances:
        lab_to_home = calculate_distance(lab.coordinate, clinician.coordinate)
        trip = home_to_patient + patient_to_lab + lab_to_home
        if best_total is None or trip < best_total:
            best_total = trip
            best_lab = lab

    return round_miles(best_total), best_lab


def find_optimal_clinician(patient_address, requires_lab, roster=None, geocoder=None):
    """
    Find the clinician with the shortest round trip to the patient.

    Every clinician in the roster is evaluated on a Home -> Patient -> Home loop,
    or Home -> Patient -> Lab -> Home through whichever lab keeps their loop
    shortest. Ties go to the clinician listed first in the roster.

    Args:
        patient_address: Street address of the patient
        requires_lab: Whether specimens must be dropped off at a lab
        roster: RosterSource with clinicians and labs (defaults to the configured CSV roster)
        geocoder: Object with geocode(address) -> Coordinate (defaults to the placeholder)

    Returns:
        DispatchResult for the winning clinician, carrying the resolved patient coordinate
    """
    roster = roster or default_roster()
    geocoder = geocoder or PlaceholderGeocoder()

    clinicians = roster.clinicians()
    if not clinicians:
        raise NoClinicianAvailable("No clinicians available for dispatch.")

    patient_coords = geocoder.geocode(patient_address)
    logger.info(f"Dispatching for '{patient_address}' at {tuple(patient_coords)}, requires_lab={requires_lab}")

    # Patient -> Lab legs are the same for every clinician
    lab_distances = []
    if requires_lab:
        labs = roster.labs()
        if not labs:
            raise NoLabAvailable("Lab drop-off required but no labs are available.")
        lab_distances = [(lab, calculate_distance(patient_coords, lab.coordinate)) for lab in labs]

    best = None
    for clinician in clinicians:
        total_distance, lab = evaluate_clinician(clinician, patient_coords, requires_lab, lab_distances)
        logger.debug(f"{clinician.name}: {total_distance} miles" + (f" via {lab.name}" if lab else ""))
        # Strict comparison keeps the earliest clinician on ties
        if best is None or total_distance < best[1]:
            best = (clinician, total_distance, lab)

    clinician, total_distance, lab = best
    result = DispatchResult(
        clinician_name=clinician.name,
        total_distance_miles=total_distance,
        lab_name=lab.name if lab else None,
        patient_coordinate=Coordinate(*patient_coords),
    )
    logger.info(f"Optimal clinician: {result.clinician_name} ({result.total_distance_miles} miles)")
    return result
