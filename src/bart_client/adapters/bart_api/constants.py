"""Constants for the BART API adapter.

API Documentation: https://api.bart.gov/docs/overview/index.aspx

Every endpoint lives at /api/<group>.aspx and selects the operation with
the `cmd` query parameter. Responses are XML documents rooted at <root>.
"""

from datetime import timedelta, timezone

BART_HOST = "api.bart.gov"
API_PATH_TEMPLATE = "/api/{group}.aspx"

# Endpoint groups
GROUP_ADVISORIES = "bsa"
GROUP_ESTIMATES = "etd"
GROUP_ROUTES = "route"
GROUP_SCHEDULES = "sched"
GROUP_STATIONS = "stn"

# Commands
CMD_SERVICE_ADVISORIES = "bsa"
CMD_ELEVATOR_ADVISORIES = "elev"
CMD_TRAIN_COUNT = "count"
CMD_DEPARTURES = "etd"
CMD_ROUTES = "routes"
CMD_ROUTE_INFO = "routeinfo"
CMD_SCHEDULES = "scheds"
CMD_ROUTE_SCHEDULE = "routesched"
CMD_STATION_SCHEDULE = "stnsched"
CMD_STATIONS = "stns"

# Date keywords accepted by the schedule commands besides "MM/DD/YYYY"
WEEKDAY = "wd"
SATURDAY = "sa"
SUNDAY = "su"
TODAY = "today"
NOW = "now"

# Time layouts
ADVISORY_TIME_FORMAT = "%a %b %d %Y %I:%M %p"  # "Thu Jan 12 2017 10:52 AM", zone follows
EFFECTIVE_DATE_FORMAT = "%m/%d/%Y %I:%M %p"  # "01/01/2017 12:00 AM"
CLOCK_TIME_FORMAT = "%I:%M %p"  # "4:38 AM"

# Zone abbreviations BART appends to advisory timestamps. Each one names a
# fixed offset, so "1:30 AM PST" on the fall-back night stays at UTC-8.
ADVISORY_TIMEZONES = {
    "PST": timezone(timedelta(hours=-8), "PST"),
    "PDT": timezone(timedelta(hours=-7), "PDT"),
    "UTC": timezone.utc,
    "GMT": timezone.utc,
}

# Descriptions BART sends as a lone record when there is nothing to report
NO_DELAYS_DESCRIPTION = "No delays reported."
ELEVATORS_FINE_DESCRIPTION = "Attention passengers: All elevators are in service. Thank You."

ADVISORY_SENTINELS = {
    CMD_SERVICE_ADVISORIES: NO_DELAYS_DESCRIPTION,
    CMD_ELEVATOR_ADVISORIES: ELEVATORS_FINE_DESCRIPTION,
}
