"""Typed parameter object for adapter initialization.

Purpose
-------
Carry the common construction parameters of the adapters through the
factory as one validated object instead of loose keyword arguments.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()``.

Notes
-----
- Pure data container. Fields an adapter does not understand should stay
  ``None``; the factory drops ``None`` values before calling a constructor.
- ``extra`` is flattened into the constructor keywords, so adapter-specific
  switches (``mask_errors``, ``client``) can travel through it.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class AdapterParams(BaseModel):
    """Common adapter initialization parameters.

    Attributes
    ----------
    model:
        Model identifier the adapter should call.
    api_key:
        API key for HTTP providers (xAI).
    base_url:
        Override for the API base URL.
    region:
        AWS region for Bedrock.
    access_key_id, secret_access_key:
        Static AWS credentials for Bedrock.
    extra:
        Adapter-specific keyword arguments.
    """

    model: Optional[str] = None
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    region: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    extra: Dict[str, Any] = Field(default_factory=dict)


__all__ = ["AdapterParams"]
