"""
Graphic Field Encoder
=====================

Converts raster images into the ZPL ^GFA (ASCII hex graphic field) format.

Images are reduced to 8-bit luminance and thresholded (no dithering):
a pixel darker than LUMINANCE_THRESHOLD becomes a printed dot. Rows are
padded on the right with white pixels up to a multiple of 8 and packed
most-significant-bit first, one hex pair per byte.

Format:
    ^GFA,<total bytes>,<total bytes>,<bytes per row>,<hex data>
"""

import logging
import os
from dataclasses import dataclass
from io import BytesIO

from ..config import LUMINANCE_THRESHOLD
from ..errors import ImageDecodeError

logger = logging.getLogger(__name__)

WHITE = 255


@dataclass(frozen=True)
class Raster:
    """Decoded grayscale image, one luminance byte per pixel, row-major."""

    width: int
    height: int
    pixels: bytes

    def __post_init__(self):
        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                f'Raster {self.width}x{self.height} needs {self.width * self.height} '
                f'pixels, got {len(self.pixels)}'
            )

    @property
    def padding(self) -> int:
        """White pixels appended to each row to reach a byte boundary."""
        return (8 - self.width % 8) % 8

    @property
    def bytes_per_row(self) -> int:
        return (self.width + self.padding) // 8


def _describe(source) -> str:
    if isinstance(source, (str, os.PathLike)):
        return os.fspath(source)
    if isinstance(source, (bytes, bytearray)):
        return f'<{len(source)} bytes>'
    return f'<{type(source).__name__}>'


def load_raster(source) -> Raster:
    """
    Load an image and convert it to a grayscale raster.

    Args:
        source: File path, encoded image bytes, or a PIL image

    Returns:
        Raster with 8-bit luminance pixels

    Raises:
        ImageDecodeError: The image cannot be read or decoded
    """
    from PIL import Image

    description = _describe(source)

    try:
        if isinstance(source, Image.Image):
            gray = source if source.mode == 'L' else source.convert('L')
        elif isinstance(source, (str, os.PathLike, bytes, bytearray)):
            stream = BytesIO(source) if isinstance(source, (bytes, bytearray)) else source
            with Image.open(stream) as img:
                gray = img.convert('L')
        else:
            raise ImageDecodeError(description, 'unsupported image source')
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        logger.warning(f"Failed to load image {description}: {e}")
        raise ImageDecodeError(description, str(e)) from e

    width, height = gray.size
    logger.debug(f"Loaded image {description} ({width}x{height})")
    return Raster(width=width, height=height, pixels=gray.tobytes())


def raster_to_hex(raster: Raster, threshold: int = LUMINANCE_THRESHOLD) -> str:
    """Pack a raster into uppercase hex, row by row, top to bottom."""
    width = raster.width
    padded_width = width + raster.padding
    pixels = raster.pixels

    hex_data = []
    for y in range(raster.height):
        offset = y * width
        byte = 0
        bit_position = 0

        for x in range(padded_width):
            # Padding pixels are white
            pixel = pixels[offset + x] if x < width else WHITE

            if pixel < threshold:
                byte |= 1 << (7 - bit_position)

            bit_position += 1
            if bit_position == 8:
                hex_data.append(f'{byte:02X}')
                byte = 0
                bit_position = 0

    return ''.join(hex_data)


def raster_to_zpl(raster: Raster) -> str:
    """Build the ^GFA graphic field for a raster."""
    hex_string = raster_to_hex(raster)

    # Both byte count parameters carry the same value
    total_bytes = len(hex_string) // 2
    bytes_per_row = raster.bytes_per_row

    logger.debug(
        f"Encoded graphic field: {total_bytes} bytes, {bytes_per_row} bytes/row"
    )
    return f'^GFA,{total_bytes},{total_bytes},{bytes_per_row},{hex_string}'


def image_to_zpl(source) -> str:
    """
    Convert an image to a ZPL graphic field.

    Args:
        source: File path, encoded image bytes, or a PIL image

    Returns:
        ^GFA command string (without field origin)

    Raises:
        ImageDecodeError: The image cannot be read or decoded
    """
    return raster_to_zpl(load_raster(source))
