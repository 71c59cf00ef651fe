"""MD5 and SHA-256 message digests with a command-line front end."""

__version__ = "0.1.0"