from .plotter import RouteVisualizer

__all__ = ["RouteVisualizer"]
