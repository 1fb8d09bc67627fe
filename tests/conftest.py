import pytest
import sys
from pathlib import Path
from PIL import Image

# Add src to sys.path so we can import atlas_cutter
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


SAMPLE_ATLAS = """\
sprite.png
size: 64,64
format: RGBA8888
filter: Linear,Linear
repeat: none
block
  rotate: false
  xy: 0,0
  size: 32,32
  orig: 32,32
  offset: 0,0
  index: -1
circle
  rotate: true
  xy: 32,0
  size: 10,20
  orig: 12,22
  offset: 1,-1
  index: 3
"""

# Marker colours painted at the top-left pixel of each stored region
BLOCK_MARKER = (255, 0, 0, 255)
CIRCLE_MARKER = (0, 0, 255, 255)


# Common test fixtures
@pytest.fixture
def sample_atlas_text():
    """Two-part atlas: an unrotated block and a sideways 10x20 circle."""
    return SAMPLE_ATLAS


@pytest.fixture
def packed_image():
    """64x64 RGBA packed image with a marker at each region's top-left."""
    img = Image.new("RGBA", (64, 64), color=(255, 255, 255, 255))
    img.putpixel((0, 0), BLOCK_MARKER)
    img.putpixel((32, 0), CIRCLE_MARKER)
    return img


@pytest.fixture
def atlas_files(tmp_path: Path, sample_atlas_text, packed_image):
    """Write sample image + atlas to disk; returns (image, atlas, out_dir)."""
    image_path = tmp_path / "sprite.png"
    packed_image.save(image_path)
    atlas_path = tmp_path / "sprite.atlas"
    atlas_path.write_text(sample_atlas_text, encoding="utf-8")
    out_dir = tmp_path / "out"
    out_dir.mkdir()
    return image_path, atlas_path, out_dir
