"""Encoding and decoding of IPMI v1.5 and v2.0 messages, commands and sensor records."""

__version__ = "0.1.0"