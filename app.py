import streamlit as st
from streamlit_folium import st_folium

import config
from LogHandler import setup_logger
from assignment_utils import find_optimal_clinician
from data_utils import default_roster
from dispatch_errors import DispatchError
from geocode_utils import build_geocoder
from map_utils import create_dispatch_map

st.set_page_config(
    page_title="Clinician Dispatch",
    page_icon="🩺",
    layout="centered"
)

# Only set up the logger once at app initialization
if 'logger' not in st.session_state:
    st.session_state.logger = setup_logger(log_file_prefix="dispatch", logger_name="")
    st.session_state.logger.info("Application started")

logger = st.session_state.logger


def show_result(result, address, roster):
    st.success("Best Match Found")
    st.markdown(f"**Clinician:** {result.clinician_name}")
    st.markdown(f"**Estimated Round-Trip:** {result.total_distance_miles} miles")
    if result.lab_name:
        st.markdown(f"**Lab Drop-off:** {result.lab_name}")
    st.caption(f"Loop Type: {result.loop_description}")

    dispatch_map = create_dispatch_map(result, roster, patient_address=address)
    st_folium(dispatch_map, width=700, height=450)


def main():
    st.title("Clinician Dispatch")
    st.write("Minimize drive time for home visit assignments.")

    if 'roster' not in st.session_state:
        st.session_state.roster = default_roster()
        st.session_state.geocoder = build_geocoder(config.GEOCODER)
        logger.info(f"Loaded roster from {config.CLINICIANS_CSV} and {config.LABS_CSV}")

    roster = st.session_state.roster
    geocoder = st.session_state.geocoder

    with st.form("dispatch_form"):
        address = st.text_input("Patient Address", placeholder="e.g. 4120 Garfield Ave, Minneapolis, MN")
        requires_lab = st.checkbox("Lab Drop-off Required")
        submitted = st.form_submit_button("Find Optimal Clinician")

    if submitted:
        # A new submission replaces whatever was shown before
        st.session_state.pop('last_dispatch', None)

        if not address.strip():
            st.warning("Please enter a patient address.")
            return

        loop_type = "Lab Visit" if requires_lab else "Standard Visit"
        with st.spinner(f"Analyzing routes for {loop_type} loop..."):
            try:
                result = find_optimal_clinician(address, requires_lab, roster=roster, geocoder=geocoder)
            except DispatchError as e:
                logger.error(f"Dispatch calculation error: {e}")
                st.error(str(e))
                return

        st.session_state.last_dispatch = (result, address)

    if 'last_dispatch' in st.session_state:
        show_result(*st.session_state.last_dispatch, roster)


if __name__ == "__main__":
    main()
