"""Release preparation driver: changelog and lockfile updates."""

__version__ = "0.1.0"
