"""Small frame-driven arcade games that draw onto a recording canvas and read a polled input state."""

__version__ = "0.1.0"