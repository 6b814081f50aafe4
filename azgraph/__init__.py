"""Client-side object model for directory objects exposed by the Graph REST API."""

__version__ = "0.1.0"
