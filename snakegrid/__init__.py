"""Grid-based snake game engine with saved settings, display state and a terminal session."""

__version__ = "0.1.0"
__all__ = ["__version__"]