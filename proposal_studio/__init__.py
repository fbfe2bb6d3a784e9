"""Wedding proposal studio: intake, style profile and proposal generation service."""

__version__ = "1.0.0"
