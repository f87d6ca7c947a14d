"""partycast — server configuration loading and OAuth provider wiring."""

__version__ = "0.1.0"
