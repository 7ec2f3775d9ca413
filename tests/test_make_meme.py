import importlib.util
from pathlib import Path

import pytest
from PIL import Image

SCRIPT = Path(__file__).resolve().parent.parent / "scripts" / "make_meme.py"


@pytest.fixture(scope="module")
def make_meme():
    spec = importlib.util.spec_from_file_location("make_meme", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.parametrize(
    "value, expected",
    [
        ("3", 3),
        ("-1", -1),
        ("--5", "--5"),
        ("-", "-"),
        ("cat", "cat"),
        ("photos/cat.png", "photos/cat.png"),
        (None, None),
    ],
)
def test_parse_selection(make_meme, value, expected):
    assert make_meme.parse_selection(value) == expected


def test_caption_mode_saves_full_resolution_meme(make_meme, library_dir, tmp_path, monkeypatch):
    out = tmp_path / "out"
    monkeypatch.setattr(make_meme, "setup_logging", lambda verbose: None)
    monkeypatch.setattr(
        "sys.argv",
        ["make_meme.py", "--mode", "caption", "--library-dir", str(library_dir),
         "--image", "green", "--top", "ONE", "--bottom", "TWO", "--output-dir", str(out)],
    )

    make_meme.main()

    saved = list(out.glob("*.png"))
    assert len(saved) == 1
    with Image.open(saved[0]) as meme:
        assert meme.size == (64, 48)
