# runwayroute/visualization/plotter.py
"""
Contains the RouteVisualizer class for generating interactive 2D maps and 3D
profile plots of a synthesized route. No geometry happens here: positions
come straight from the route waypoints and sampler output.
"""
from typing import List, Optional

import folium
import plotly.graph_objects as go

from ..config import RouteConfig
from ..data_models import Route, Sample
from ..sampler import sample_series


class RouteVisualizer:
    """Draws the waypoint polyline by phase and the sampled aircraft state."""

    def create_route_map(self, route: Route, aircraft: Optional[Sample] = None) -> folium.Map:
        first = route.waypoints[0].position
        m = folium.Map(location=[first.lat, first.lon], zoom_start=RouteConfig.MAP_ZOOM_START,
                       tiles=RouteConfig.MAP_TILES)

        # Each phase segment shares its last point with the next one so the line stays connected
        segments = route.phase_segments()
        for i, (phase, waypoints) in enumerate(segments):
            points = [(wp.position.lat, wp.position.lon) for wp in waypoints]
            if i + 1 < len(segments):
                nxt = segments[i + 1][1][0].position
                points.append((nxt.lat, nxt.lon))
            if len(points) < 2:
                continue
            folium.PolyLine(
                locations=points, color=RouteConfig.PHASE_COLORS.get(phase.value, 'blue'),
                weight=3, opacity=0.8, popup=f"{phase.value}",
            ).add_to(m)

        for wp in route.waypoints:
            folium.CircleMarker(
                location=[wp.position.lat, wp.position.lon], radius=4,
                color=RouteConfig.PHASE_COLORS.get(wp.phase.value, 'blue'), fill=True,
                popup=(f"<b>{wp.name}</b> ({wp.id})<br>{wp.altitude_ft:.0f} ft / {wp.speed_kts:.0f} kt"
                       f"<br>{wp.cumulative_distance_nm:.1f} nm, {wp.cumulative_time_min:.1f} min"),
            ).add_to(m)

        if aircraft is not None:
            folium.Marker(
                location=[aircraft.position.lat, aircraft.position.lon],
                popup=(f"<b>Aircraft</b><br>{aircraft.phase.value}<br>Alt: {aircraft.altitude_ft:.0f} ft"
                       f"<br>Hdg: {aircraft.heading_deg:.0f}°<br>GS: {aircraft.speed_kts:.0f} kt"),
                icon=folium.Icon(color='green', icon='plane', prefix='fa'),
            ).add_to(m)

        positions = route.positions()
        m.fit_bounds([positions.min(axis=0).tolist(), positions.max(axis=0).tolist()])
        return m

    def create_profile_plot(self, route: Route, samples: Optional[List[Sample]] = None) -> go.Figure:
        if samples is None:
            samples = sample_series(route)
        fig = go.Figure()
        fig.add_trace(go.Scatter3d(
            x=[s.position.lon for s in samples], y=[s.position.lat for s in samples],
            z=[s.altitude_ft for s in samples], mode='lines', line=dict(width=4), name='Sampled track',
        ))
        fig.add_trace(go.Scatter3d(
            x=[wp.position.lon for wp in route.waypoints], y=[wp.position.lat for wp in route.waypoints],
            z=[wp.altitude_ft for wp in route.waypoints], mode='markers+text',
            text=[wp.name for wp in route.waypoints], marker=dict(size=4, color='red'), name='Waypoints',
        ))
        fig.update_layout(title=f'Route Profile ({route.total_distance_nm:.0f} nm, {route.total_time_min:.0f} min)',
                          scene=dict(xaxis_title='Longitude', yaxis_title='Latitude', zaxis_title='Altitude (ft MSL)',
                                     aspectratio=dict(x=1, y=1, z=0.5)),
                          margin=dict(r=20, l=10, b=10, t=40))
        return fig

    def save_map(self, m: folium.Map, filename: str) -> None:
        m.save(filename)
        print(f"\n-> Interactive 2D map generated: '{filename}'.")

    def save_3d_plot(self, fig: go.Figure, filename: str) -> None:
        fig.write_html(filename)
        print(f"-> Interactive 3D plot generated: '{filename}'.")
