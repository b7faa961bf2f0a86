"""A small real-time player-versus-monster battle game built on pygame."""

__version__ = "0.1.0"