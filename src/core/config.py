"""
Configuration constants and environment setup.
"""

import os
from datetime import timedelta
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# =============================================================================
# PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent.parent.parent
DB_PATH = Path(
    os.environ.get("CALENDAR_DB_PATH", PROJECT_ROOT / "data" / "db" / "calendar-requests.db")
)
OUTPUT_DIR = PROJECT_ROOT / "output"

# =============================================================================
# TIMEZONE CONFIGURATION (US Pacific, 2007+ rule)
# =============================================================================

STANDARD_OFFSET = timedelta(hours=-8)  # PST
DAYLIGHT_OFFSET = timedelta(hours=-7)  # PDT

DST_START_MONTH = 3  # March
DST_START_SUNDAY = 2  # 2nd Sunday
DST_END_MONTH = 11  # November
DST_END_SUNDAY = 1  # 1st Sunday
DST_TRANSITION_HOUR = 2  # 02:00 local

# All-day events span 00:00 on the first day to 23:59 on the last day
ALL_DAY_START_TIME = "T00:00:00"
ALL_DAY_END_TIME = "T23:59:00"

# =============================================================================
# CALENDAR EXPORT CONFIGURATION
# =============================================================================

ICS_PRODID = "-//Overland East Bay//Website//EN"
ICS_UID_DOMAIN = "www.overland-eastbay.com"
ICS_EXTENSION = ".ics"
ICS_MEDIA_TYPE = "text/calendar;charset=utf-8"

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"

# =============================================================================
# WIDGET CONFIGURATION
# =============================================================================

WIDGET_CLASS = "calendar-widget"
BUTTONS_CLASS = "calendar-buttons"
WIDGET_ATTRIBUTES = ["title", "start", "end", "location", "description"]

# Where rendered widgets point their .ics download links
ICS_ENDPOINT = os.environ.get("ICS_ENDPOINT", "/v1/calendar/event.ics")

# =============================================================================
# API CONFIGURATION
# =============================================================================

CALENDAR_API_KEY = os.environ.get("CALENDAR_API_KEY", "")
API_HOST = os.environ.get("API_HOST", "0.0.0.0")
API_PORT = int(os.environ.get("API_PORT", "8000"))
API_DEBUG = os.environ.get("API_DEBUG", "false").lower() == "true"
API_VERSION = "1.0.0"
