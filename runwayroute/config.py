# runwayroute/config.py


class RouteConfig:
    """Configuration defaults for route synthesis and playback."""

    # Aircraft cruise defaults
    DEFAULT_CRUISE_ALTITUDE_FT = 35000
    DEFAULT_CRUISE_SPEED_KTS = 450

    # Playback: simulated seconds per wall-clock second
    DEFAULT_PLAYBACK_SPEED = 60.0
    DEFAULT_SERIES_POINTS = 200

    # Map rendering
    MAP_TILES = "CartoDB positron"
    MAP_ZOOM_START = 7
    PHASE_COLORS = {
        'THRESHOLD_DEP': 'green',
        'DEPARTURE': 'green',
        'SID': 'orange',
        'ENROUTE': 'blue',
        'STAR': 'purple',
        'APPROACH': 'red',
        'THRESHOLD_ARR': 'red',
    }

    LOG_LEVEL = "INFO"
    LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'
