"""Utility constants for gmepoch.

Time unit constants represent durations in seconds. The epoch year is the
reference point every conversion is measured from.
"""

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400

# 1970-01-01T00:00:00Z
EPOCH_YEAR = 1970
