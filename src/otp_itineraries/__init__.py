"""Display-ready legs and map geometry for trip-planner itineraries."""

__version__ = "0.1.0"
