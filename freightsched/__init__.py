"""Match cargo to freight by location and time, with an interactive menu."""

__version__ = "1.0.0"
__all__ = ["__version__"]