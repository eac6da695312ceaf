"""Import locale translation files into a database table."""

__version__ = "0.1.0"
