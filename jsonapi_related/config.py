"""Decoder configuration read from ``JSONAPI_RELATED_*`` environment variables."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DecoderSettings(BaseSettings):
    """Knobs for the decode pipeline."""

    model_config = SettingsConfigDict(env_prefix="JSONAPI_RELATED_", frozen=True)

    check_resource_type: bool = Field(
        default=True,
        description="Reject a document 'type' that differs from the entity's Meta.type_.",
    )
    require_resource_type: bool = Field(
        default=False,
        description="Treat a missing top-level 'type' member as a missing field.",
    )
    strict_attributes: bool = Field(
        default=True,
        description=(
            "Validate attributes in pydantic strict JSON mode. "
            "Turn off to allow lax coercion such as '1' -> 1."
        ),
    )


@lru_cache(maxsize=1)
def get_settings() -> DecoderSettings:
    return DecoderSettings()
