"""Encode and decode infrared command frames for Daikin ARC and BRC air-conditioner remotes."""

__version__ = "0.1.0"
__all__ = ["protocol", "sender", "receiver", "arc", "brc"]