"""
Exceptions raised by the Hartley transform engine.
"""


class ConfigurationError(ValueError):
    """Transform size or dtype the engine cannot be built for."""


class BufferSizeError(ValueError):
    """A caller-supplied buffer does not have the length the engine expects."""
