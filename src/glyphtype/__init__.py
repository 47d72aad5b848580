"""glyphtype: terminal typing animation with a Braille shimmer."""

from glyphtype.config import AnimationConfig, ConfigurationError
from glyphtype.driver import run

__version__ = "0.1.0"

__all__ = ["AnimationConfig", "ConfigurationError", "run"]
