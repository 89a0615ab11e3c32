"""Frame-by-frame logic of a night-watch survival game: office, power, clock, cameras, saves and transition screens."""

__version__ = "1.3.1"