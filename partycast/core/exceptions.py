"""Custom exception hierarchy for partycast."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

# ── Config loading ───────────────────────────────────────────────
# The loader never wraps its failures. These names only give the two
# failure kinds a stable spelling at call sites.

FileAccessError = OSError
ParseError = ValidationError


class PartycastBaseError(Exception):
    """Base exception for all partycast errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.context: dict[str, Any] = context or {}


# ── Auth Layer ───────────────────────────────────────────────────

class ProviderError(PartycastBaseError):
    """An authentication provider could not be constructed."""


class UnknownProviderError(ProviderError):
    """Config names a provider that has no registered producer."""
