# src/length/constants.py
import math

# Astronomical unit, IAU 2012 Resolution B2 [m]
ASTRONOMICAL_UNIT_M = 149597870700

# Julian light-year (c * 365.25 d) [m]
LIGHT_YEAR_M = 9460730472580800

# Parsec: one au subtending one arcsecond [m]
PARSEC_M = (648000 / math.pi) * ASTRONOMICAL_UNIT_M

# International nautical mile [m]
NAUTICAL_MILE_M = 1852

# International yard and pound agreement (1959) [m]
INCH_M = 0.0254
FOOT_M = 0.3048
YARD_M = 0.9144
MILE_M = 1609.344

# Library version, also exposed as `length.__version__`
VERSION = "0.0.9"
