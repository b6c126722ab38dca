"""Wire protocol, connections, configuration and process entry points for a simulated operating system."""

__version__ = "0.1.0"