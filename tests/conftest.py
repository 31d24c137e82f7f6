import pytest
from PIL import Image


def split_image(width, height, left, right):
    """RGB image whose left half is one colour and right half another."""
    img = Image.new("RGB", (width, height), left)
    img.paste(right, (width // 2, 0, width, height))
    return img


@pytest.fixture
def grey_image():
    return Image.new("RGB", (10, 10), (128, 128, 128))


@pytest.fixture
def image_file(tmp_path):
    path = tmp_path / "black.png"
    Image.new("RGB", (40, 20), (0, 0, 0)).save(path)
    return path
