"""Configuration models for tagdown."""

from .options import ConversionOptions

__all__ = ["ConversionOptions"]
