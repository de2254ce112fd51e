"""DTO validation package for adapters."""

from .adapter_params import AdapterParams

__all__ = ["AdapterParams"]
