# Number of decimal places used when comparing coordinate components.
DECIMAL_PLACES = 10

# Maximum absolute latitude [degrees]
LATITUDE_LIMIT = 90.0

# Maximum absolute longitude [degrees]
LONGITUDE_LIMIT = 180.0

# Allowed number of components in a position.
POSITION_CARDINALITIES = (2, 3)
