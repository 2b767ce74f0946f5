from datetime import date

from icon_gen import create_icon_image


def test_icon_size_and_mode():
    img = create_icon_image(date(2016, 1, 30))
    assert img.size == (64, 64)
    assert img.mode == "RGBA"


def test_icon_has_text_below_header():
    img = create_icon_image(date(2016, 1, 30))
    body = img.crop((0, 16, 64, 64)).convert("L")
    assert body.getextrema()[0] < 128
