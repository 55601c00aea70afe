"""Static analysis core of a differential-privacy validator."""

__version__ = "0.1.0"
