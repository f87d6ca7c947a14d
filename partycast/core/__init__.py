"""Core building blocks — config file model, errors, and logging."""

from partycast.core.config import Config, Credentials, load_config
from partycast.core.exceptions import (
    FileAccessError,
    ParseError,
    PartycastBaseError,
    ProviderError,
    UnknownProviderError,
)

__all__ = [
    "Config",
    "Credentials",
    "load_config",
    "FileAccessError",
    "ParseError",
    "PartycastBaseError",
    "ProviderError",
    "UnknownProviderError",
]
