"""IEEE 802.11 channel conversions and constants, Kconfig-style expressions and config-file helpers."""

__version__ = "0.1.0"