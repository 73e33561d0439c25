"""Exception types raised by xorwow generators."""


class RngError(Exception):
    """A random source could not produce the requested bytes."""


class EntropyError(RngError):
    """The entropy collaborator returned an unusable reply."""
