import pytest

from solong.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    color_from_spec,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    split_words,
    strip_comments,
)

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1 ",
"  c None",
". c #FF0000",
"X c blue",
// pixels follow
"X. ",
" .X"
};
"""


def test_split_words_spaces_and_tabs():
    assert split_words("  a\tb   c \t") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_keeps_newlines_in_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_strip_comments_block_outside_quotes():
    text = 'x /* hi */ "y"'
    result = strip_comments(text)
    assert result == 'x          "y"'
    assert len(result) == len(text)


def test_strip_comments_leaves_quoted_text():
    text = '"a /* b */ c"'
    assert strip_comments(text) == text


def test_strip_comments_line_comment():
    assert strip_comments('"a"// note\n"b"') == '"a"        "b"'


def test_color_from_spec_hex():
    assert color_from_spec("#FF0000", None) == 0xFF0000


def test_color_from_spec_hex_lower():
    assert color_from_spec("#00ff7f", None) == 0x00FF7F


def test_color_from_spec_name_case_insensitive():
    assert color_from_spec("RED", None) == 0xFF0000


def test_color_from_spec_two_words():
    assert color_from_spec("light", "green") == 0x90EE90


def test_color_from_spec_none_is_minus_one():
    assert color_from_spec("None", None) == -1


def test_color_from_spec_unknown_is_black():
    assert color_from_spec("nosuchcolour", None) == 0


def test_parse_xpm_basic():
    image = parse_xpm(["2 2 2 1", "a c #112233", "b c white", "ab", "ba"])
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0x112233
    assert image.pixel(1, 0) == 0xFFFFFF
    assert image.rows == ((0x112233, 0xFFFFFF), (0xFFFFFF, 0x112233))


def test_parse_xpm_transparent():
    image = parse_xpm(["1 1 1 1", "  c None", " "])
    assert image.pixel(0, 0) == TRANSPARENT


def test_parse_xpm_multi_char_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == 0xFF0000


def test_parse_xpm_single_char_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == 0x0000FF


def test_parse_xpm_unknown_key_is_black():
    image = parse_xpm(["1 1 1 1", "a c red", "z"])
    assert image.pixel(0, 0) == 0


def test_parse_xpm_other_keys_before_c():
    image = parse_xpm(["1 1 1 2", "ab s thing c green", "ab"])
    assert image.pixel(0, 0) == 0x00FF00


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a m red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_pixel_out_of_range():
    image = XpmImage(1, 1, ((5,),))
    with pytest.raises(IndexError):
        image.pixel(1, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_parse_xpm_text_with_comments():
    image = parse_xpm_text(SAMPLE_FILE)
    assert (image.width, image.height) == (3, 2)
    assert image.rows == (
        (0x0000FF, 0xFF0000, TRANSPARENT),
        (TRANSPARENT, 0xFF0000, 0x0000FF),
    )


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "open.xpm"
    path.write_text(SAMPLE_FILE)
    image = load_xpm(path)
    assert (image.width, image.height) == (3, 2)
    assert image.pixel(2, 1) == 0x0000FF


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")