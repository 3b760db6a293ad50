from lineweave.style import Color, Style


def test_plain_style_leaves_text_alone():
    assert Style().paint("hello") == "hello"


def test_green_foreground():
    assert Style().with_foreground(Color.GREEN).paint("hi") == "\x1b[32mhi\x1b[0m"


def test_bold_and_colour_combined():
    painted = Style().with_bold().with_foreground(Color.RED).paint("x")
    assert painted == "\x1b[1;31mx\x1b[0m"


def test_builders_do_not_mutate():
    base = Style()
    italic = base.with_italic()
    assert base.italic is False
    assert italic.italic is True
    assert base.is_plain and not italic.is_plain


def test_painted_text_contains_original():
    for color in Color:
        painted = Style().with_foreground(color).paint("word")
        assert "word" in painted
        assert painted.startswith("\x1b[")
        assert painted.endswith("\x1b[0m")


def test_distinct_colours_render_differently():
    a = Style().with_foreground(Color.WHITE).paint("t")
    b = Style().with_foreground(Color.LIGHT_GRAY).paint("t")
    assert a != b
    assert Color.LIGHT_GRAY.foreground_code == "97"