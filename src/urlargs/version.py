"""Single source of truth for the urlargs version string."""

__version__: str = "1.0.0"
