"""Badge streak engine: daily price-change streaks and claim periods."""

__version__ = "0.1.0"
