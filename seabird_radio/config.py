"""Environment configuration for seabird radio."""

import os

HAMQSL_URL = os.getenv("HAMQSL_URL", "https://www.hamqsl.com/solarxml.php")
POTA_SPOTS_URL = os.getenv("POTA_SPOTS_URL", "https://api.pota.app/v1/spots")
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "10"))

# Optional shared secret for the command endpoint; unset disables the check.
API_KEY = os.getenv("API_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

DEFAULT_MODE = "SSB"
