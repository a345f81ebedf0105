"""Constants used across the application."""

import os

# Kernel directory - configurable via environment variable
# Default: 'kernels' in current working directory
KERNEL_DIR = os.getenv("SPICE_KERNEL_DIR", "kernels")

# Capacity of output cells handed to coverage and search routines
WINDOW_CAPACITY = int(os.getenv("SPICE_WINDOW_CAPACITY", "2000"))

# Workspace size (number of intervals) for geometry finder searches
MAX_INTERVALS = int(os.getenv("SPICE_MAX_INTERVALS", "750"))

# Kernel file extensions recognised when scanning a kernel directory
KERNEL_EXTENSIONS = (
    ".bsp", ".bc", ".bpc", ".bds", ".tls", ".tpc", ".tf", ".ti", ".tsc", ".tm",
)

# Time constants
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
J2000_JULIAN_DATE = 2451545.0  # JD of 2000 JAN 01 12:00:00 TDB

# Length constants
METERS_PER_KM = 1000.0
AU_KM = 149597870.7  # IAU 2012 astronomical unit

# Angle constants
ARCSECONDS_PER_DEGREE = 3600.0

# Earth equatorial radius and flattening used by the geodetic conversions
EARTH_EQUATORIAL_RADIUS_KM = 6378.1366
EARTH_FLATTENING = 0.00335281066474748071984552861852

# Lengths of the message buffers read back from the toolkit
SHORT_MSG_LEN = 26
EXPLAIN_MSG_LEN = 100
LONG_MSG_LEN = 1841
TRACEBACK_LEN = 200
OPTION_LEN = 100
