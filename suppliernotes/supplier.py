"""Supplier identity model."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator


class SupplierIdentity(BaseModel):
    """A deduplicated supplier, created once per distinct normalized key.

    Identities are immutable: the first spelling seen during a run fixes the
    display name, and later spellings that normalize to the same key resolve
    to this same object.
    """

    model_config = {"frozen": True}

    supplier_id: str = Field(
        description="Short fingerprint of normalized_key; stable across runs."
    )
    display_name: str = Field(
        description="Alias-table name or title-cased first-seen spelling."
    )
    normalized_key: str = Field(
        description="Lowercase, punctuation-free, suffix-stripped form used for equality."
    )
    created_at: datetime = Field(
        description="When the supplier was first observed in the run."
    )

    @field_validator("created_at")
    @classmethod
    def created_at_must_be_timezone_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("created_at must be timezone-aware")
        return value
