"""Physical and simulation constants for Daisyworld.

Values follow the energy-balance formulation of Watson & Lovelock (1983).
"""

# Albedos of the different surfaces (fraction of light reflected)
WHITE_ALBEDO = 0.75
BLACK_ALBEDO = 0.25
GRAY_ALBEDO = 0.5
GROUND_ALBEDO = 0.5

# Stefan's constant in ergs / (second * cm^2 * K^4)
STEFAN_CONSTANT = 0.0000567

# Base solar flux in ergs / (second * cm^2)
FLUX_CONSTANT = 917000.0

# Subtract from Kelvin to get Celsius
CELSIUS_OFFSET = 273.0

# How strongly a patch's albedo shifts its temperature from the planetary mean
CONDUCTIVITY_CONSTANT = 20.0

# Growth law: 1 - GROWTH_CURVATURE * (OPTIMAL_TEMPERATURE - T)^2
OPTIMAL_TEMPERATURE = 22.5
GROWTH_CURVATURE = 0.003265
DEATH_RATE = 0.3

# Time stepping
TIME_STEP = 0.01
UPDATES_PER_TIME_UNIT = 100

# Populations below this are set to exactly zero
EXTINCTION_FLOOR = 0.001

# Default seed used by Planet.boost_if_extinct
BOOST_THRESHOLD = 0.01

# Latitude bands (index 0 = pole, last index = equator)
LATITUDE_BANDS = 90
POLAR_LUMINOSITY_MULTIPLIER = 0.6
EQUATORIAL_LUMINOSITY_MULTIPLIER = 1.5
DISPLAY_BANDS = 10
