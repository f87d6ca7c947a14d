"""OAuth provider contract and stock providers for Google and GitHub."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Protocol
from urllib.parse import urlencode


@dataclass(frozen=True)
class OAuthProviderConfig:
    """Immutable OAuth provider endpoints."""

    name: str
    authorize_url: str
    token_url: str
    userinfo_url: str
    scopes: tuple[str, ...]


GOOGLE = OAuthProviderConfig(
    name="google",
    authorize_url="https://accounts.google.com/o/oauth2/v2/auth",
    token_url="https://oauth2.googleapis.com/token",
    userinfo_url="https://www.googleapis.com/oauth2/v3/userinfo",
    scopes=("openid", "email", "profile"),
)

GITHUB = OAuthProviderConfig(
    name="github",
    authorize_url="https://github.com/login/oauth/authorize",
    token_url="https://github.com/login/oauth/access_token",
    userinfo_url="https://api.github.com/user",
    scopes=("read:user", "user:email"),
)


class Provider(ABC):
    """Interface for a constructed authentication provider."""

    @property
    @abstractmethod
    def name(self) -> str:
        ...

    @property
    @abstractmethod
    def callback_url(self) -> str:
        ...

    @property
    @abstractmethod
    def scopes(self) -> tuple[str, ...]:
        ...

    @abstractmethod
    def authorize_url(self, state: str) -> str:
        """URL the user is redirected to in order to grant access."""
        ...


class ProviderProducer(Protocol):
    """Constructs a provider from credentials, a callback URL and scopes."""

    def __call__(
        self, key: str, secret: str, callback_url: str, *scopes: str,
    ) -> Provider:
        ...


class OAuth2Provider(Provider):
    """Authorization-code OAuth 2.0 provider bound to one client."""

    def __init__(
        self,
        endpoints: OAuthProviderConfig,
        client_id: str,
        client_secret: str,
        callback_url: str,
        scopes: tuple[str, ...] = (),
    ) -> None:
        self._endpoints = endpoints
        self._client_id = client_id
        self._client_secret = client_secret
        self._callback_url = callback_url
        self._scopes = scopes or endpoints.scopes

    def __repr__(self) -> str:
        return (
            f"OAuth2Provider(name={self.name!r}, client_id={self._client_id!r}, "
            f"callback_url={self._callback_url!r})"
        )

    @property
    def name(self) -> str:
        return self._endpoints.name

    @property
    def endpoints(self) -> OAuthProviderConfig:
        return self._endpoints

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def client_secret(self) -> str:
        return self._client_secret

    @property
    def callback_url(self) -> str:
        return self._callback_url

    @property
    def scopes(self) -> tuple[str, ...]:
        return self._scopes

    def authorize_url(self, state: str) -> str:
        params = {
            "client_id": self._client_id,
            "redirect_uri": self._callback_url,
            "state": state,
            "scope": " ".join(self._scopes),
        }
        if self.name == "google":
            params["response_type"] = "code"
            params["access_type"] = "offline"

        return f"{self._endpoints.authorize_url}?{urlencode(params)}"


def new_google(key: str, secret: str, callback_url: str, *scopes: str) -> OAuth2Provider:
    return OAuth2Provider(GOOGLE, key, secret, callback_url, scopes)


def new_github(key: str, secret: str, callback_url: str, *scopes: str) -> OAuth2Provider:
    return OAuth2Provider(GITHUB, key, secret, callback_url, scopes)


PRODUCERS: dict[str, ProviderProducer] = {
    "google": new_google,
    "github": new_github,
}
