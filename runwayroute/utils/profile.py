# runwayroute/utils/profile.py
"""
Piecewise-linear vertical profile for the enroute portion of a route.

The profile climbs from the transition altitude at a fixed gradient, holds at
cruise, then descends at a fixed gradient so that it is back at the
transition altitude where the enroute leg ends. Top of climb and top of
descent fall out of the gradients; when the leg is too short to reach cruise
the two ramps meet at a lower peak.
"""
from dataclasses import dataclass

from ..constants import RouteConstants


@dataclass(frozen=True)
class AltitudeProfile:
    start_nm: float
    end_nm: float
    cruise_altitude_ft: float
    transition_altitude_ft: float = RouteConstants.TRANSITION_ALTITUDE_FT
    climb_gradient_ft_per_nm: float = RouteConstants.CLIMB_GRADIENT_FT_PER_NM
    descent_gradient_ft_per_nm: float = RouteConstants.DESCENT_GRADIENT_FT_PER_NM

    @classmethod
    def for_enroute(cls, start_nm: float, end_nm: float, cruise_altitude_ft: float) -> "AltitudeProfile":
        # Cruise below the transition altitude: the floor drops with it
        transition = min(RouteConstants.TRANSITION_ALTITUDE_FT, cruise_altitude_ft)
        return cls(start_nm=start_nm, end_nm=end_nm, cruise_altitude_ft=cruise_altitude_ft,
                   transition_altitude_ft=transition)

    @property
    def toc_distance_nm(self) -> float:
        """Along-track distance of top of climb."""
        climb_ft = self.cruise_altitude_ft - self.transition_altitude_ft
        return self.start_nm + climb_ft / self.climb_gradient_ft_per_nm

    @property
    def tod_distance_nm(self) -> float:
        """Along-track distance of top of descent."""
        descent_ft = self.cruise_altitude_ft - self.transition_altitude_ft
        return self.end_nm - descent_ft / self.descent_gradient_ft_per_nm

    def altitude_at(self, distance_nm: float) -> float:
        """Altitude in feet at an along-track distance from the departure threshold.

        Always within [transition_altitude_ft, cruise_altitude_ft].
        """
        climb_line = self.transition_altitude_ft + self.climb_gradient_ft_per_nm * (distance_nm - self.start_nm)
        descent_line = self.transition_altitude_ft + self.descent_gradient_ft_per_nm * (self.end_nm - distance_nm)
        altitude = min(climb_line, descent_line, self.cruise_altitude_ft)
        return max(self.transition_altitude_ft, altitude)
