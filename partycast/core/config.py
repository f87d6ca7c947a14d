"""Server configuration file — typed model and loader.

The file is a single JSON object::

    {
      "hostname": "example.com",
      "port": 8080,
      "database": "db.sqlite",
      "cookie-secret": "s3cr3t",
      "auth": {"google": {"key": "k1", "secret": "s1"}}
    }

Every key is optional. Absent keys (and explicit ``null``) leave the field at
its zero value, unknown keys are ignored, and key names match exactly.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated, Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SecretStr,
    StrictInt,
    StrictStr,
    ValidationInfo,
    FieldSerializationInfo,
    field_serializer,
    model_validator,
)

from partycast.core.logging import get_logger

log = get_logger(__name__)

Port = Annotated[StrictInt, Field(ge=0, le=65535)]


def _reveal(value: SecretStr, info: FieldSerializationInfo) -> str:
    if info.context and info.context.get("reveal_secrets"):
        return value.get_secret_value()
    return str(value)


class _FileModel(BaseModel):
    """Base for models decoded from the config file."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls_and_excluded(cls, data: Any, info: ValidationInfo) -> Any:
        """Null means "absent"; excluded fields are never decoded from the file."""
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data
        from_file = bool(info.context and info.context.get("from_file"))
        excluded = {
            name for name, field in cls.model_fields.items() if field.exclude
        } if from_file else set()
        return {
            k: v for k, v in data.items()
            if v is not None and k not in excluded
        }


class Credentials(_FileModel):
    """OAuth client credentials for one provider."""

    key: StrictStr = ""
    secret: SecretStr = SecretStr("")

    @field_serializer("secret")
    def _dump_secret(self, value: SecretStr, info: FieldSerializationInfo) -> str:
        return _reveal(value, info)


class Config(_FileModel):
    """Full runtime configuration of a server process."""

    hostname: StrictStr = ""
    port: Port = 0
    # Bind address, supplied by the caller after loading.
    host: StrictStr = Field(default="", exclude=True)
    database: StrictStr = ""
    cookie_secret: SecretStr = Field(default=SecretStr(""), alias="cookie-secret")
    auth: dict[str, Credentials] = Field(default_factory=dict)

    @field_serializer("cookie_secret")
    def _dump_cookie_secret(self, value: SecretStr, info: FieldSerializationInfo) -> str:
        return _reveal(value, info)

    def provider_names(self) -> list[str]:
        return sorted(self.auth)

    def dump_json(self, redact: bool = False) -> str:
        """Serialize with file key names. ``host`` is never written."""
        return self.model_dump_json(
            by_alias=True, indent=2, context={"reveal_secrets": not redact},
        )


def load_config(path: str | os.PathLike[str]) -> Config:
    """Read ``path`` and decode it into a fresh ``Config``.

    Raises the underlying ``OSError`` if the file cannot be read and
    ``pydantic.ValidationError`` if the content is not valid JSON or a
    value has the wrong type. Neither is wrapped.
    """
    raw = Path(path).read_bytes()
    config = Config.model_validate_json(raw, context={"from_file": True})
    log.info(
        "config_loaded",
        path=str(path),
        hostname=config.hostname,
        port=config.port,
        providers=config.provider_names(),
    )
    return config
