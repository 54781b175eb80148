"""MAP-E / MAP-T / LW4over6 status resolution."""

__version__ = "0.1.0"
