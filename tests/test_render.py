import pytest

from qr_forge import QRModel
from qr_forge.render import render_image, render_svg, render_text, save


@pytest.fixture(scope="module")
def qr():
    return QRModel.encode_text("render me", "M")


def test_image_size_and_pixels(qr):
    image = render_image(qr, box_size=4, border=2)
    assert image.size == ((qr.module_count + 4) * 4,) * 2
    assert image.getpixel((0, 0)) == (255, 255, 255)
    assert image.getpixel((2 * 4, 2 * 4)) == (0, 0, 0)
    assert image.getpixel((2 * 4 + 4 + 1, 2 * 4 + 4 + 1)) == (255, 255, 255)


def test_image_arguments_are_checked(qr):
    with pytest.raises(ValueError):
        render_image(qr, box_size=0)
    with pytest.raises(ValueError):
        render_image(qr, border=-1)


def test_svg_has_one_rect_per_dark_module(qr):
    svg = render_svg(qr, box_size=3, border=1)
    dark = sum(qr.is_dark(r, c) for r in range(qr.module_count) for c in range(qr.module_count))
    assert svg.count("<rect") == dark + 1
    size = (qr.module_count + 2) * 3
    assert f'width="{size}" height="{size}"' in svg
    assert '<rect x="3" y="3" width="3" height="3" fill="#000000"/>' in svg


def test_text_rendering(qr):
    text = render_text(qr, border=1, dark="#", light=".")
    lines = text.splitlines()
    assert len(lines) == qr.module_count + 2
    assert all(len(line) == qr.module_count + 2 for line in lines)
    assert lines[1].startswith(".#######.")


@pytest.mark.parametrize("suffix", [".png", ".svg", ".txt"])
def test_save_by_suffix(qr, tmp_path, suffix):
    path = save(qr, tmp_path / f"code{suffix}", box_size=2)
    assert path.exists()
    assert path.stat().st_size > 0


def test_png_signature(qr, tmp_path):
    path = save(qr, tmp_path / "code.PNG")
    assert path.read_bytes()[:8] == b"\x89PNG\r\n\x1a\n"


def test_save_rejects_unknown_suffix(qr, tmp_path):
    with pytest.raises(ValueError):
        save(qr, tmp_path / "code.gif")
