"""
This module defines the base Pydantic model shared by the Keystone schemas.

`_KeystoneModel` generates camelCase aliases for every field so payloads can be
exchanged with JavaScript clients, while still allowing population by the
original snake_case names.
"""

from __future__ import annotations

from humps import camelize
from pydantic import BaseModel, ConfigDict


class _KeystoneModel(BaseModel):
    """
    A base Pydantic model for all Keystone application schemas.
    """

    model_config = ConfigDict(
        alias_generator=camelize,  # camelCase aliases for API interaction
        populate_by_name=True,
        from_attributes=True,  # allow building schemas from ORM rows / objects
    )
