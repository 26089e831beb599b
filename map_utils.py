import folium

from data_utils import location_by_name
from route_utils import calculate_route_distance


def create_popup(title, content_lines, width=250, height=110):
    """Create an HTML popup with a bold title followed by one line per entry."""
    html = f"<b>{title}</b><br>" + "<br>".join(content_lines)
    return folium.Popup(folium.IFrame(html, width=width, height=height), max_width=width)


def create_dispatch_map(result, roster, patient_coords=None, patient_address=""):
    """
    Create a map of the winning clinician's loop.

    Args:
        result: DispatchResult returned by find_optimal_clinician
        roster: RosterSource the result was computed from
        patient_coords: (latitude, longitude) of the patient, defaults to the one on the result
        patient_address: Address shown in the patient popup

    Returns:
        folium.Map centered on the patient
    """
    clinician = location_by_name(roster.clinicians(), result.clinician_name)
    lab = location_by_name(roster.labs(), result.lab_name) if result.lab_name else None

    patient = tuple(patient_coords if patient_coords is not None else result.patient_coordinate)
    home = tuple(clinician.coordinate)

    m = folium.Map(location=list(patient), zoom_start=11)

    folium.Marker(
        location=list(home),
        popup=create_popup(f"Clinician: {clinician.name}", [clinician.address]),
        tooltip=f"{clinician.name} (home)",
        icon=folium.Icon(color="blue", icon="home"),
    ).add_to(m)

    folium.Marker(
        location=list(patient),
        popup=create_popup("Patient", [patient_address or "Patient location"]),
        tooltip="Patient",
        icon=folium.Icon(color="red", icon="user", prefix="fa"),
    ).add_to(m)

    loop = [home, patient]
    if lab is not None:
        folium.Marker(
            location=list(lab.coordinate),
            popup=create_popup(f"Lab: {lab.name}", [lab.address]),
            tooltip=lab.name,
            icon=folium.Icon(color="green", icon="flask", prefix="fa"),
        ).add_to(m)
        loop.append(tuple(lab.coordinate))
    loop.append(home)

    folium.PolyLine(
        locations=[list(point) for point in loop],
        color="blue",
        weight=4,
        opacity=0.7,
        tooltip=f"{result.loop_description}: {calculate_route_distance(loop)} miles",
    ).add_to(m)

    m.fit_bounds([list(point) for point in loop])
    return m
