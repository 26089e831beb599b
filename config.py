import os
import logging
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent


def _resolve_path(value):
    path = Path(value)
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return path


CLINICIANS_CSV = _resolve_path(os.getenv("DISPATCH_CLINICIANS_CSV", "data/clinicians.csv"))
LABS_CSV = _resolve_path(os.getenv("DISPATCH_LABS_CSV", "data/labs.csv"))

# "placeholder" keeps the patient at the city-center point, "nominatim" geocodes for real
GEOCODER = os.getenv("DISPATCH_GEOCODER", "placeholder")
NOMINATIM_USER_AGENT = os.getenv("NOMINATIM_USER_AGENT", "clinician_dispatch")
GEOCODER_TIMEOUT = float(os.getenv("GEOCODER_TIMEOUT", "10"))

# Minneapolis city center
PATIENT_PLACEHOLDER_LAT = 44.9778
PATIENT_PLACEHOLDER_LON = -93.2650

LOG_DIR = str(_resolve_path(os.getenv("LOG_DIR", "logs")))
LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)
