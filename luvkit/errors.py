"""Errors raised for invalid calls into the array and gamut APIs."""


class LuvkitError(Exception):
    """Base class for luvkit errors."""
    pass


class ChannelShapeError(LuvkitError, ValueError):
    """Color array does not have 3 channels on its last axis."""
    pass


class GamutMethodError(LuvkitError, ValueError):
    """Unknown gamut mapping method."""
    pass
