# runwayroute/constants.py
import math


class RouteConstants:
    # Spherical earth. Every geodesy function uses exactly these three values.
    EARTH_RADIUS_NM: float = 3440.065
    DEG_TO_RAD: float = math.pi / 180.0
    RAD_TO_DEG: float = 180.0 / math.pi

    METERS_TO_NM: float = 1 / 1852.0

    # Fixed phase geometry, all in nm measured from the relevant threshold
    CLIMB_OUT_DISTANCE_NM = 5.0
    SID_DISTANCE_NM = 15.0
    STAR_ENTRY_DISTANCE_NM = 20.0
    FAF_DISTANCE_NM = 8.0

    # Below this direct distance the fixed offsets above are scaled down
    MIN_ENROUTE_LENGTH_NM = 10.0
    NOMINAL_LAYOUT_DISTANCE_NM = SID_DISTANCE_NM + STAR_ENTRY_DISTANCE_NM + MIN_ENROUTE_LENGTH_NM
    DEGENERATE_DISTANCE_NM = 0.01

    # Enroute fixes
    ENROUTE_SPACING_NM = 100.0
    MIN_ENROUTE_WAYPOINTS = 3
    MAX_ENROUTE_WAYPOINTS = 15

    # Vertical profile
    TRANSITION_ALTITUDE_FT = 10000.0
    CLIMB_GRADIENT_FT_PER_NM = 300.0
    DESCENT_GRADIENT_FT_PER_NM = 300.0
    CLIMB_OUT_ALTITUDE_FT = 3000.0
    SID_ALTITUDE_FRACTION = 0.3
    STAR_ALTITUDE_FT = 10000.0
    FAF_ALTITUDE_FT = 2500.0

    # Target speeds at each fix
    CLIMB_OUT_SPEED_KTS = 180.0
    SID_SPEED_KTS = 250.0
    BELOW_TRANSITION_SPEED_KTS = 250.0
    STAR_SPEED_KTS = 250.0
    FAF_SPEED_KTS = 160.0
    LANDING_SPEED_KTS = 140.0

    # Representative speeds used to time the leg flown INTO each fix
    CLIMB_OUT_LEG_SPEED_KTS = 180.0
    SID_LEG_SPEED_KTS = 250.0
    STAR_LEG_SPEED_KTS = 280.0
    FAF_LEG_SPEED_KTS = 180.0
    FINAL_LEG_SPEED_KTS = 140.0

    MINUTES_PER_HOUR = 60.0
