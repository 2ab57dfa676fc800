import pytest
from PIL import Image


@pytest.fixture
def solid_image():
    def _make(width, height, color=(255, 255, 255, 255)):
        return Image.new("RGBA", (width, height), color)

    return _make


class RecordingSink:
    """Level sink that keeps every level it receives."""

    def __init__(self):
        self.levels = []

    def __call__(self, level, image):
        self.levels.append((level, image))

    @property
    def sizes(self):
        return [image.size for _, image in self.levels]


@pytest.fixture
def recording_sink():
    return RecordingSink()
