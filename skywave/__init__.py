"""HF sky-wave propagation: MUFs, absorption, antenna gains, map readers and field strength."""

__version__ = "0.1.0"