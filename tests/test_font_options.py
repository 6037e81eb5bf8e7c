from vimcanvas.font_options import (
    DEFAULT_FONT_SIZE,
    FontEdging,
    FontHinting,
    FontOptions,
    parse_font_name,
    points_to_pixels,
)


def test_parse_one_font_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono")
    assert len(options.font_list) == 1
    assert options.primary_font() == "Fira Code Mono"


def test_parse_many_fonts_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono,Console")
    assert options.font_list == ["Fira Code Mono", "Console"]


def test_parse_edging_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono:#e-subpixelantialias")
    assert options.edging is FontEdging.SUBPIXEL_ANTI_ALIAS


def test_parse_hinting_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono:#h-slight")
    assert options.hinting is FontHinting.SLIGHT


def test_parse_font_size_float_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono:h15.5")
    assert options.size == points_to_pixels(15.5)
    assert options.allow_float_size is True


def test_parse_all_params_together_from_guifont_setting():
    options = FontOptions.parse("Fira Code Mono:h15:b:i:#h-slight:#e-alias")
    assert options.size == points_to_pixels(15.0)
    assert options.bold is True
    assert options.italic is True
    assert options.edging is FontEdging.ALIAS
    assert options.hinting is FontHinting.SLIGHT
    assert options.allow_float_size is False


def test_parse_font_name_with_escapes():
    assert parse_font_name("Fira Code Mono") == "Fira Code Mono"
    assert parse_font_name("Fira_Code_Mono") == "Fira Code Mono"
    assert parse_font_name(r"Fira\_Code\_Mono") == "Fira_Code_Mono"
    assert parse_font_name(r"Fira\\_Code\\_Mono") == "Fira\\ Code\\ Mono"
    assert parse_font_name("Fira_Code_Mono\\") == "Fira Code Mono"


def test_empty_setting_gives_defaults():
    options = FontOptions.parse("")
    assert options == FontOptions()
    assert options.primary_font() is None
    assert options.size == points_to_pixels(DEFAULT_FONT_SIZE)
    assert options.hinting is FontHinting.FULL
    assert options.edging is FontEdging.ANTI_ALIAS


def test_invalid_size_is_ignored_but_marks_float():
    options = FontOptions.parse("Mono:hx.y")
    assert options.size == points_to_pixels(DEFAULT_FONT_SIZE)
    assert options.allow_float_size is True


def test_unknown_hinting_and_edging_fall_back():
    assert FontHinting.parse("bogus") is FontHinting.NONE
    assert FontEdging.parse("bogus") is FontEdging.ALIAS
    assert FontHinting.parse("normal") is FontHinting.NORMAL
    assert FontEdging.parse("antialias") is FontEdging.ANTI_ALIAS


def test_equality_ignores_allow_float_size():
    a = FontOptions.parse("Mono:h12")
    b = FontOptions.parse("Mono:h12")
    b.allow_float_size = True
    assert a == b
    assert a != FontOptions.parse("Mono:h13")


def test_empty_fallbacks_are_skipped():
    options = FontOptions.parse(",A,,B_C,")
    assert options.font_list == ["A", "B C"]