"""House hunting tracker: lookups, plots and stamp duty."""

__version__ = "0.1.0"
