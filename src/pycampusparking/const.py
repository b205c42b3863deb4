"""Constants shared across the library."""

DEFAULT_TIMEZONE = "America/New_York"

MINUTES_PER_DAY = 24 * 60

OVERNIGHT_START = 3 * 60
BUSINESS_START = 7 * 60
OPEN_START = 16 * 60 + 30
TRANSITION_WINDOW = 30

# Minutes before the first departure during which a sub-schedule counts as active.
DEPARTURE_GRACE_MINUTES = 5

EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_M = EARTH_RADIUS_KM * 1000

STOP_MATCH_THRESHOLD_M = 40.0

# Vehicles reported on this route id are not in service.
OUT_OF_SERVICE_ROUTE_ID = -1

# Client-side route color overrides (hex without leading #).
ROUTE_COLOR_OVERRIDES = {
    12624: "e10028",
    12625: "2563eb",
}

SNAPSHOT_KEYS = {
    "vehicles": "vehicles",
    "routes": "routes",
    "stops": "stop",
    "shapes": "shape",
}
