import pytest

from amoled_maker.utils import format_size, parse_black_point, window_title


@pytest.mark.parametrize(
    "text, current, expected",
    [
        ("", 42, 0),
        ("   ", 42, 42),
        ("17", 42, 17),
        ("255", 0, 255),
        (" 12 ", 42, 42),
        ("1_0", 42, 42),
        ("\u0661\u0662", 42, 42),
        ("+12", 42, 12),
        ("256", 42, 42),
        ("-1", 42, 42),
        ("abc", 42, 42),
        ("1.5", 42, 42),
    ],
)
def test_parse_black_point(text, current, expected):
    assert parse_black_point(text, current) == expected


def test_window_title(tmp_path):
    assert window_title(None) == "Amoled Maker"
    assert window_title(tmp_path / "cat.png") == "Amoled Maker - cat.png"
    assert window_title("photos/dog.jpg") == "Amoled Maker - dog.jpg"


def test_format_size():
    assert format_size(None) == "—"
    assert format_size(512) == "512 Б"
    assert format_size(2048) == "2.0 КБ"
    assert format_size(3 * 1024 * 1024) == "3.0 МБ"
