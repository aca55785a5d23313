"""Fixed constants: epochs, unit factors, NAIF body IDs, Earth orientation data.

Values follow Meeus, Astronomical Algorithms (2nd ed.) unless noted.
"""

# Epochs (Julian Days)
JD_J2000 = 2451545.0  # 2000-01-01 12:00 TT
JD_DAY0 = 2451544.5  # 2000-01-01 00:00; rms-julian day 0 starts here
MJD_OFFSET = 2400000.5
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_GREGORIAN_YEAR = 365.2425

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
HOURS_PER_DAY = 24.0

# Angle: degrees per circle and sexagesimal
DEGREES_PER_CIRCLE = 360.0
HALF_CIRCLE_DEGREES = 180.0
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0
DEGREES_PER_HOUR_RA = 15.0  # right ascension: 360° / 24 h

# Body IDs (NAIF)
SUN_ID = 10
MERCURY_ID = 199
VENUS_ID = 299
EARTH_ID = 399
MOON_ID = 301
MARS_ID = 499
JUPITER_ID = 599
SATURN_ID = 699
URANUS_ID = 799
NEPTUNE_ID = 899
PLUTO_ID = 999

# Outer planets are usually only present as barycenters in generic SPKs.
NAIF_BARYCENTER_IDS: dict[int, int] = {
    MARS_ID: 4,
    JUPITER_ID: 5,
    SATURN_ID: 6,
    URANUS_ID: 7,
    NEPTUNE_ID: 8,
    PLUTO_ID: 9,
}

# Mean obliquity of the ecliptic (Meeus 22.2), arcseconds, powers of T.
OBLIQUITY_ARCSEC = (84381.448, -46.8150, -0.00059, 0.001813)

# Greenwich mean sidereal time at a given JD (Meeus 12.4), degrees.
GMST_COEFFS = (280.46061837, 360.98564736629, 0.000387933, -1.0 / 38710000.0)

# J2000 galactic frame: north galactic pole and galactic longitude of the NCP.
GALACTIC_POLE_RA_DEG = 192.85948
GALACTIC_POLE_DEC_DEG = 27.12825
GALACTIC_NCP_LONGITUDE_DEG = 122.93192

# Right ascension of the north ecliptic pole; its declination is 90° - obliquity.
ECLIPTIC_POLE_RA_HOURS = 18.0

# Standard altitudes for rise/set (Meeus ch. 15), degrees.
STANDARD_ALTITUDE_STARS = -0.5667
STANDARD_ALTITUDE_SUN = -0.8333

# Treat |cos H| up to 1 + this as grazing rather than circumpolar.
GRAZING_TOLERANCE = 1e-12
