"""XML configuration, typed preferences, flight data sources and prerendered fonts for glass cockpit displays."""

__version__ = "0.1.0"