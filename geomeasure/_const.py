"""
Constants declarations for geomeasure
"""

# Mean Earth Radius (Haversine)
EARTH_RADIUS_KM = 6371.0
EARTH_RADIUS_METERS = EARTH_RADIUS_KM * 1000

# Vincenty iteration policy
VINCENTY_MAX_ITERATIONS = 200
VINCENTY_TOLERANCE = 1e-12  # radians

# Speed
KPH_TO_MPH = 0.621371
SECONDS_PER_HOUR = 3600

# Default spacing between generated intermediate points
DEFAULT_POINT_SPACING_METERS = 100.0
