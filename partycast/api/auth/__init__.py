"""Authentication providers — the producer contract and config wiring."""

from partycast.api.auth.oauth import build_providers, callback_url
from partycast.api.auth.providers import (
    GITHUB,
    GOOGLE,
    PRODUCERS,
    OAuth2Provider,
    OAuthProviderConfig,
    Provider,
    ProviderProducer,
)

__all__ = [
    "GITHUB",
    "GOOGLE",
    "PRODUCERS",
    "OAuth2Provider",
    "OAuthProviderConfig",
    "Provider",
    "ProviderProducer",
    "build_providers",
    "callback_url",
]
