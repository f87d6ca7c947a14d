"""Wire the ``auth`` section of a loaded config to provider producers."""

from __future__ import annotations

from collections.abc import Mapping

from partycast.core.config import Config
from partycast.core.exceptions import UnknownProviderError
from partycast.core.logging import get_logger

from .providers import PRODUCERS, Provider, ProviderProducer

log = get_logger(__name__)

_DEFAULT_PORTS = {"http": 80, "https": 443}


def callback_url(config: Config, provider: str, scheme: str = "http") -> str:
    """Redirect target registered with the provider for this server."""
    netloc = config.hostname
    if config.port and config.port != _DEFAULT_PORTS.get(scheme):
        netloc = f"{netloc}:{config.port}"
    return f"{scheme}://{netloc}/auth/{provider}/callback"


def build_providers(
    config: Config,
    producers: Mapping[str, ProviderProducer] = PRODUCERS,
    scheme: str = "http",
) -> dict[str, Provider]:
    """Construct one provider per ``auth`` entry.

    Raises:
        UnknownProviderError: an entry has no producer.
    """
    providers: dict[str, Provider] = {}
    for name in config.provider_names():
        producer = producers.get(name)
        if producer is None:
            raise UnknownProviderError(
                f"No producer registered for provider: {name}",
                context={"provider": name, "known": sorted(producers)},
            )
        creds = config.auth[name]
        providers[name] = producer(
            creds.key, creds.secret.get_secret_value(), callback_url(config, name, scheme),
        )

    log.info("providers_built", providers=list(providers))
    return providers
