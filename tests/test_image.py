import pytest

from wireframe.mlx.image import (
    get_good_color,
    images_match,
    new_image,
    rgb_shifts,
)


def _color_map(x, y, w, h):
    return (x * 255) // w + ((((w - x) * 255) // w) << 16) + (((y * 255) // h) << 8)


@pytest.mark.parametrize("size", [42, 242])
def test_new_image_is_zeroed_and_padded(size):
    image = new_image(size, size)
    assert image.width == size and image.height == size
    assert image.size_line >= size * image.bpp // 8
    assert image.size_line % 4 == 0
    assert len(image.data) == image.size_line * image.height
    assert not any(image.data)


@pytest.mark.parametrize("size", [42, 242])
@pytest.mark.parametrize("endian", [0, 1])
def test_color_map_round_trip(size, endian):
    image = new_image(size, size, 32, endian)
    for y in range(size):
        for x in range(size):
            image.put_pixel(x, y, _color_map(x, y, size, size))
    for y in range(size):
        for x in range(size):
            assert image.get_pixel(x, y) == _color_map(x, y, size, size)


def test_little_endian_byte_layout():
    image = new_image(2, 2, 32, 0)
    image.put_pixel(0, 0, 0x11223344)
    assert bytes(image.data[0:4]) == bytes([0x44, 0x33, 0x22, 0x11])


def test_big_endian_byte_layout():
    image = new_image(2, 2, 32, 1)
    image.put_pixel(0, 0, 0x11223344)
    assert bytes(image.data[0:4]) == bytes([0x11, 0x22, 0x33, 0x44])


def test_pixel_offsets_follow_layout():
    image = new_image(5, 3, 24, 0)
    assert image.pixel_offset(0, 0) == 0
    assert image.pixel_offset(3, 1) - image.pixel_offset(2, 1) == 3
    assert image.pixel_offset(2, 2) - image.pixel_offset(2, 1) == image.size_line


def test_color_is_masked_to_pixel_size():
    image = new_image(2, 2, 24, 0)
    image.put_pixel(1, 1, 0xFF112233)
    assert image.get_pixel(1, 1) == 0x112233


def test_pixel_outside_image():
    image = new_image(4, 4)
    with pytest.raises(IndexError):
        image.put_pixel(4, 0, 0)
    with pytest.raises(IndexError):
        image.get_pixel(0, -1)


@pytest.mark.parametrize(
    "args", [(0, 10, 32, 0), (10, -1, 32, 0), (10, 10, 12, 0), (10, 10, 32, 2)]
)
def test_invalid_image_parameters(args):
    with pytest.raises(ValueError):
        new_image(*args)


def test_images_match():
    assert images_match(new_image(42, 42), new_image(42, 42))
    assert not images_match(new_image(42, 42), new_image(242, 242))
    assert not images_match(new_image(42, 42, 32, 0), new_image(42, 42, 32, 1))


def test_rgb_shifts_true_color():
    assert rgb_shifts(0xFF0000, 0xFF00, 0xFF) == (16, 8, 8, 8, 0, 8)


def test_rgb_shifts_565():
    assert rgb_shifts(0xF800, 0x07E0, 0x001F) == (11, 5, 5, 6, 0, 5)


def test_rgb_shifts_rejects_empty_mask():
    with pytest.raises(ValueError):
        rgb_shifts(0, 0xFF00, 0xFF)


def test_deep_display_keeps_color():
    shifts = rgb_shifts(0xFF0000, 0xFF00, 0xFF)
    assert get_good_color(0xFF99FF, 24, shifts) == 0xFF99FF


@pytest.mark.parametrize(
    "color, expected",
    [(0xFFFFFF, 0xFFFF), (0xFF0000, 0xF800), (0x00FF00, 0x07E0), (0x0000FF, 0x001F)],
)
def test_shallow_display_packs_channels(color, expected):
    shifts = rgb_shifts(0xF800, 0x07E0, 0x001F)
    assert get_good_color(color, 16, shifts) == expected