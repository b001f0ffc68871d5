"""Extract translatable strings into a POT catalog."""

__version__ = "1.0.0"
