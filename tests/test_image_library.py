import pytest
from PIL import Image

from mememe.data import ImageLibrary, LibraryImage


def test_discovers_nested_and_uppercase_photos(library):
    assert sorted(image.name for image in library.images) == ["blue", "green"]


def test_metadata_and_loading(library):
    green = library.get_by_name("green")
    assert (green.width, green.height) == (64, 48)

    loaded = green.load_image()
    assert loaded.mode == "RGB"
    assert loaded.size == (64, 48)


def test_lookup_misses(library):
    assert library.get_by_name("missing") is None
    with pytest.raises(IndexError):
        library.get_by_index(10)


def test_missing_directory_is_empty(tmp_path):
    assert ImageLibrary(tmp_path / "nope").images == []


def test_unreadable_photo_is_skipped(library_dir):
    (library_dir / "broken.png").write_bytes(b"not really a png")
    names = [image.name for image in ImageLibrary(library_dir).images]
    assert "broken" not in names
    assert "green" in names


def test_oversized_photo_is_skipped(library_dir, monkeypatch):
    Image.new("RGB", (200, 200)).save(library_dir / "huge.png")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10000)

    library = ImageLibrary(library_dir)

    assert library.get_by_name("huge") is None
    assert library.get_by_name("green") is not None


def test_plain_file_has_unknown_size(tmp_path):
    path = tmp_path / "loose.png"
    Image.new("RGB", (5, 7)).save(path)

    photo = LibraryImage(path)

    assert photo.name == "loose"
    assert (photo.width, photo.height) == (0, 0)
    assert photo.load_image().size == (5, 7)
