"""Tests for provider producers and config-to-provider wiring."""

from __future__ import annotations

from unittest.mock import MagicMock
from urllib.parse import parse_qs, urlsplit

import pytest

from partycast.api.auth.oauth import build_providers, callback_url
from partycast.api.auth.providers import (
    GITHUB,
    GOOGLE,
    PRODUCERS,
    OAuth2Provider,
    Provider,
    new_github,
    new_google,
)
from partycast.core.config import Config
from partycast.core.exceptions import PartycastBaseError, UnknownProviderError


def _config(**overrides: object) -> Config:
    data: dict[str, object] = {
        "hostname": "example.com",
        "port": 8080,
        "cookie-secret": "s3cr3t",
        "auth": {
            "google": {"key": "gk", "secret": "gs"},
            "github": {"key": "hk", "secret": "hs"},
        },
    }
    data.update(overrides)
    return Config.model_validate(data)


class TestProducers:
    def test_google_default_scopes(self) -> None:
        provider = new_google("gk", "gs", "http://example.com/auth/google/callback")
        assert isinstance(provider, Provider)
        assert provider.name == "google"
        assert provider.client_id == "gk"
        assert provider.client_secret == "gs"
        assert provider.scopes == GOOGLE.scopes

    def test_explicit_scopes_replace_defaults(self) -> None:
        provider = new_github("hk", "hs", "http://cb", "repo", "gist")
        assert provider.scopes == ("repo", "gist")

    def test_repr_hides_secret(self) -> None:
        provider = new_google("gk", "very-secret", "http://cb")
        assert "very-secret" not in repr(provider)

    def test_producers_dict(self) -> None:
        assert PRODUCERS["google"] is new_google
        assert PRODUCERS["github"] is new_github
        assert len(PRODUCERS) == 2


class TestAuthorizeUrl:
    def test_google(self) -> None:
        provider = new_google("gk", "gs", "http://example.com/auth/google/callback")
        url = provider.authorize_url("st4te")
        parts = urlsplit(url)
        query = parse_qs(parts.query)
        assert url.startswith(GOOGLE.authorize_url + "?")
        assert query["client_id"] == ["gk"]
        assert query["redirect_uri"] == ["http://example.com/auth/google/callback"]
        assert query["state"] == ["st4te"]
        assert query["scope"] == ["openid email profile"]
        assert query["response_type"] == ["code"]
        assert query["access_type"] == ["offline"]
        assert "gs" not in query.get("client_secret", [])

    def test_github_has_no_google_params(self) -> None:
        provider = new_github("hk", "hs", "http://cb")
        query = parse_qs(urlsplit(provider.authorize_url("s")).query)
        assert urlsplit(provider.authorize_url("s")).netloc == "github.com"
        assert query["scope"] == ["read:user user:email"]
        assert "response_type" not in query
        assert "access_type" not in query


class TestCallbackUrl:
    def test_includes_port(self) -> None:
        assert callback_url(_config(), "google") == "http://example.com:8080/auth/google/callback"

    def test_omits_default_http_port(self) -> None:
        assert callback_url(_config(port=80), "github") == "http://example.com/auth/github/callback"

    def test_omits_default_https_port(self) -> None:
        url = callback_url(_config(port=443), "github", scheme="https")
        assert url == "https://example.com/auth/github/callback"

    def test_keeps_80_under_https(self) -> None:
        url = callback_url(_config(port=80), "github", scheme="https")
        assert url == "https://example.com:80/auth/github/callback"

    def test_omits_zero_port(self) -> None:
        assert callback_url(_config(port=0), "google") == "http://example.com/auth/google/callback"


class TestBuildProviders:
    def test_builds_all_configured(self) -> None:
        providers = build_providers(_config())
        assert sorted(providers) == ["github", "google"]
        google = providers["google"]
        assert isinstance(google, OAuth2Provider)
        assert google.client_id == "gk"
        assert google.callback_url == "http://example.com:8080/auth/google/callback"
        assert providers["github"].scopes == GITHUB.scopes

    def test_empty_auth(self) -> None:
        assert build_providers(_config(auth={})) == {}

    def test_unknown_provider(self) -> None:
        config = _config(auth={"myspace": {"key": "k", "secret": "s"}})
        with pytest.raises(UnknownProviderError) as exc_info:
            build_providers(config)
        assert isinstance(exc_info.value, PartycastBaseError)
        assert exc_info.value.context["provider"] == "myspace"
        assert exc_info.value.context["known"] == ["github", "google"]

    def test_custom_producer_called_with_credentials(self) -> None:
        producer = MagicMock(return_value=MagicMock(spec=Provider))
        config = _config(auth={"custom": {"key": "ck", "secret": "cs"}})
        providers = build_providers(config, producers={"custom": producer}, scheme="https")
        producer.assert_called_once_with(
            "ck", "cs", "https://example.com:8080/auth/custom/callback",
        )
        assert providers["custom"] is producer.return_value
