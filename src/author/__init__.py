"""author - maintain the list of project contributors in author.txt."""

__version__ = "0.1.0"
