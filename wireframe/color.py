"""Colour chosen for a map vertex from its height."""

_YELLOW = 0xFFFF00
_GREEN = 0x00FF00
_STEP = 20
_MAX_INTENSITY = 255


def get_color(z):
    """Return the 0xRRGGBB colour for height ``z``.

    The height is truncated to an integer first. Height zero is yellow.
    Any other height starts from green, and the red channel is shifted by
    ``-z * 20``, capped at 255. Positive heights therefore give a negative
    red offset, and the returned value can be negative.
    """
    height = int(z)
    if height == 0:
        intensity = int(min(height * _STEP, _MAX_INTENSITY))
        return _YELLOW - (intensity << 8)
    intensity = int(min(-height * _STEP, _MAX_INTENSITY))
    return _GREEN + (intensity << 16)