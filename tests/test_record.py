import dataclasses

import pytest
from PIL import Image

from mememe.meme import MemeRecord


def test_record_is_immutable(photo):
    meme = MemeRecord("ONE", "TWO", photo, photo.copy())
    with pytest.raises(dataclasses.FrozenInstanceError):
        meme.top_text = "THREE"


@pytest.mark.parametrize("field", ["original_image", "composed_image"])
def test_record_requires_both_images(photo, field):
    images = {"original_image": photo, "composed_image": photo}
    images[field] = Image.new("RGB", (0, 0))
    with pytest.raises(ValueError):
        MemeRecord(top_text="", bottom_text="", **images)


def test_record_rejects_missing_image(photo):
    with pytest.raises(ValueError):
        MemeRecord("ONE", "TWO", None, photo)


def test_repr_mentions_captions(photo):
    assert "top='ONE'" in repr(MemeRecord("ONE", "TWO", photo, photo))
