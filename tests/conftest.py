import pytest
from PIL import Image as PILImage


@pytest.fixture
def black_image():
    """8x2 all-black grayscale image."""
    return PILImage.new('L', (8, 2), 0)


@pytest.fixture
def logo_path(tmp_path):
    """10x2 RGB PNG: left half black, right half white."""
    img = PILImage.new('RGB', (10, 2), (255, 255, 255))
    for y in range(2):
        for x in range(5):
            img.putpixel((x, y), (0, 0, 0))
    path = tmp_path / 'logo.png'
    img.save(path)
    return path


@pytest.fixture
def png_bytes(black_image):
    from io import BytesIO

    buffer = BytesIO()
    black_image.save(buffer, format='PNG')
    return buffer.getvalue()
