"""In-memory images in ZPixmap layout and pixel value conversion."""

from dataclasses import dataclass

_PAD_BITS = 32
_SUPPORTED_BPP = (8, 16, 24, 32)


@dataclass(eq=False)
class Image:
    """A packed pixel buffer; ``endian`` is 0 for little, 1 for big endian."""

    width: int
    height: int
    bpp: int
    size_line: int
    endian: int
    depth: int
    data: bytearray

    @property
    def bytes_per_pixel(self):
        return self.bpp // 8

    def pixel_offset(self, x, y):
        """Return the byte offset of pixel (x, y) in ``data``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) lies outside a {self.width}x{self.height} image"
            )
        return y * self.size_line + x * self.bytes_per_pixel

    def _byteorder(self):
        return "big" if self.endian else "little"

    def put_pixel(self, x, y, color):
        """Store ``color`` at (x, y), keeping only the bytes a pixel holds."""
        size = self.bytes_per_pixel
        offset = self.pixel_offset(x, y)
        value = color & ((1 << (8 * size)) - 1)
        self.data[offset:offset + size] = value.to_bytes(size, self._byteorder())

    def get_pixel(self, x, y):
        """Return the value stored at (x, y)."""
        size = self.bytes_per_pixel
        offset = self.pixel_offset(x, y)
        return int.from_bytes(self.data[offset:offset + size], self._byteorder())


def new_image(width, height, bpp=32, endian=0):
    """Create a zero-filled image; each line is padded to 32 bits."""
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    if bpp not in _SUPPORTED_BPP:
        raise ValueError(f"unsupported bits per pixel: {bpp}")
    if endian not in (0, 1):
        raise ValueError(f"endian must be 0 or 1, got {endian}")
    size_line = (width * bpp + _PAD_BITS - 1) // _PAD_BITS * (_PAD_BITS // 8)
    return Image(
        width=width,
        height=height,
        bpp=bpp,
        size_line=size_line,
        endian=endian,
        depth=min(bpp, 24),
        data=bytearray(size_line * height),
    )


def images_match(first, second):
    """Tell whether two images share size and pixel layout."""
    return (
        first.width == second.width
        and first.height == second.height
        and first.bpp == second.bpp
        and first.size_line == second.size_line
        and first.endian == second.endian
        and first.depth == second.depth
    )


def _shift_and_bits(mask):
    if mask <= 0:
        raise ValueError(f"colour mask must be positive, got {mask:#x}")
    shift = 0
    while not mask & 1:
        mask >>= 1
        shift += 1
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def rgb_shifts(red_mask, green_mask, blue_mask):
    """Return (shift, bits) for red, green and blue, flattened to six values."""
    return (
        *_shift_and_bits(red_mask),
        *_shift_and_bits(green_mask),
        *_shift_and_bits(blue_mask),
    )


def get_good_color(color, depth, shifts):
    """Convert 0xRRGGBB to a pixel value for a display of ``depth`` bits.

    Displays of 24 bits or more take the colour as it is; shallower ones
    get each channel scaled down and placed by ``shifts`` (see rgb_shifts).
    """
    if depth >= 24:
        return color
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )