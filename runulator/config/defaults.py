"""Default values for settings and forecasts."""

# The run shown before the user enters anything.
DEFAULT_DISTANCE = 10.0  # in km
DEFAULT_DURATION = 60 * 60  # in seconds

# The run used when the remembered one can't be rebuilt.
FALLBACK_DISTANCE = 10.0  # in km
FALLBACK_DURATION = 55 * 60  # in seconds

DEFAULT_WEIGHT = 100  # in the default weight unit (kg)
DEFAULT_HEIGHT = 190  # in the default height unit (cm)

# Exponent of Riegel's formula; values between 1.06 and 1.08 are common.
DEFAULT_FATIGUE_COEFFICIENT = 1.0759
