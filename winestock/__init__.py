"""WineStock - wine inventory mutation core."""

__version__ = "0.1.0"
