import pytest
from PIL import Image, UnidentifiedImageError

from amoled_maker.services.errors import AmoledConversionError, DecodeError, EncodeError


def test_load_image_metadata(image_service, png_file):
    data = image_service.load_image(png_file)
    assert data.path == png_file
    assert (data.width, data.height) == (2, 2)
    assert data.mode == "RGBA"
    assert data.size_bytes == png_file.stat().st_size
    assert data.pil_image.getpixel((1, 0)) == (10, 10, 10, 128)


def test_load_image_keeps_source_mode(image_service, tmp_path):
    path = tmp_path / "gray.png"
    Image.new("L", (3, 1), 5).save(path)
    assert image_service.load_image(path).mode == "L"


def test_load_missing_file(image_service, tmp_path):
    with pytest.raises(DecodeError):
        image_service.load_image(tmp_path / "missing.png")


def test_load_non_image(image_service, tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("definitely not a png")
    with pytest.raises(DecodeError) as info:
        image_service.load_image(path)
    assert isinstance(info.value.__cause__, UnidentifiedImageError)
    assert isinstance(info.value, AmoledConversionError)


def test_load_image_bytes(image_service, png_file):
    raw = png_file.read_bytes()
    data = image_service.load_image_bytes(raw)
    assert data.path is None
    assert data.size_bytes == len(raw)
    assert data.pil_image.size == (2, 2)


def test_load_image_bytes_garbage(image_service):
    with pytest.raises(DecodeError):
        image_service.load_image_bytes(b"\x00\x01\x02")


def test_save_rgba(image_service, tmp_path):
    path = image_service.save_rgba(bytes([1, 2, 3, 4, 5, 6, 7, 8]), 2, 1, tmp_path / "out.png")
    with Image.open(path) as saved:
        assert saved.mode == "RGBA"
        assert saved.getpixel((0, 0)) == (1, 2, 3, 4)
        assert saved.getpixel((1, 0)) == (5, 6, 7, 8)


def test_save_without_suffix_uses_png(image_service, tmp_path):
    path = image_service.save_rgba(bytes(4), 1, 1, tmp_path / "out")
    with Image.open(path) as saved:
        assert saved.format == "PNG"


def test_save_wrong_length(image_service, tmp_path):
    with pytest.raises(EncodeError):
        image_service.save_rgba(bytes(7), 2, 1, tmp_path / "out.png")


def test_save_to_missing_directory(image_service, tmp_path):
    with pytest.raises(EncodeError):
        image_service.save_rgba(bytes(4), 1, 1, tmp_path / "nope" / "out.png")
