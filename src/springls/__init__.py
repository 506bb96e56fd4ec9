"""springls - language server for Spring Boot configuration files."""

__version__ = "0.1.0"
