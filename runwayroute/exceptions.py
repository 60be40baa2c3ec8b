# runwayroute/exceptions.py


class RouteError(Exception):
    """Base exception for all route synthesis and playback errors."""
    pass


class InvalidRouteParameterError(RouteError):
    """Raised when a runway end or cruise parameter is outside its domain."""
    def __init__(self, parameter: str, value, message: str = "Invalid route parameter"):
        self.parameter = parameter
        self.value = value
        super().__init__(f"{message}: {parameter}={value!r}")


class RunwayDataError(RouteError):
    """The runway data source is missing or unreadable."""
    pass


class RunwayNotFoundError(RunwayDataError):
    """Raised when an airport or runway designator is not present in the data."""
    def __init__(self, airport: str, designator=None):
        self.airport = airport
        self.designator = designator
        target = f"{airport} {designator}" if designator else airport
        super().__init__(f"Runway data not found for {target}")


class PlaybackError(RouteError):
    """Invalid playback control request."""
    pass
