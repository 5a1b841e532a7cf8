import pytest

from motdtext.dialect import Dialect, detect_dialect, resolve_dialect


@pytest.mark.parametrize(
    "text, expected",
    [
        ("&#FF00FFHello", Dialect.HEX_AMPERSAND),
        ('{"text":"hi"}', Dialect.JSON),
        ("<red>hi</red>", Dialect.MINI_MESSAGE),
        ("&cHello", Dialect.LEGACY_AMPERSAND),
        ("§cHello", Dialect.LEGACY_SECTION),
        ("just words", Dialect.AUTO),
        ("", Dialect.AUTO),
        (None, Dialect.AUTO),
    ],
)
def test_detect_dialect_scenarios(text, expected):
    assert detect_dialect(text) == expected


def test_json_requires_braces_and_known_key():
    assert detect_dialect('  {"extra": []}  ') == Dialect.JSON
    assert detect_dialect('{"color":"red"}') == Dialect.JSON
    # Braces without a component key are not JSON; no other marker either.
    assert detect_dialect('{"foo": 1}') == Dialect.AUTO
    # Missing closing brace.
    assert detect_dialect('{"text":"hi"') == Dialect.AUTO


def test_json_wins_over_angle_brackets():
    assert detect_dialect('{"text":"<red>hi</red>"}') == Dialect.JSON


def test_angle_brackets_need_both_sides():
    assert detect_dialect("a > b") == Dialect.AUTO
    assert detect_dialect("a < b & c") == Dialect.LEGACY_AMPERSAND


def test_hex_ampersand_beats_bare_ampersand_and_section():
    assert detect_dialect("§cRed &#00ff00green") == Dialect.HEX_AMPERSAND
    # Five digits is not the compact hex form.
    assert detect_dialect("&#00ff0 text") == Dialect.LEGACY_AMPERSAND


def test_repeated_hex_markers_take_priority_over_bare_escapes():
    # The ampersand x-marker wins over a stray section sign...
    assert detect_dialect("§ &x&f&f&0&0&f&fHi") == Dialect.LEGACY_AMPERSAND
    # ...but a section x-marker wins over ampersands.
    assert detect_dialect("§x§f§f§0§0§f§fHi & more") == Dialect.LEGACY_SECTION
    # With no x-marker the section sign is checked before the ampersand.
    assert detect_dialect("§c& text") == Dialect.LEGACY_SECTION


def test_detection_is_deterministic():
    sample = "&x&1&2&3&4&5&6 §l mixed"
    assert detect_dialect(sample) == detect_dialect(sample)


@pytest.mark.parametrize("text", ["<b>x</b>", "&cHi", "plain", "", '{"text":"a"}'])
def test_resolve_auto_or_missing_delegates_to_detection(text):
    assert resolve_dialect(Dialect.AUTO, text) == detect_dialect(text)
    assert resolve_dialect(None, text) == detect_dialect(text)


@pytest.mark.parametrize("dialect", [d for d in Dialect if d != Dialect.AUTO])
def test_resolve_explicit_dialect_is_kept(dialect):
    for text in ("<b>x</b>", "&cHi", "plain", ""):
        assert resolve_dialect(dialect, text) is dialect


def test_from_name_is_case_insensitive_and_trimmed():
    assert Dialect.from_name("mini_message") is Dialect.MINI_MESSAGE
    assert Dialect.from_name("  Legacy_Section ") is Dialect.LEGACY_SECTION
    assert Dialect.from_name("AUTO") is Dialect.AUTO


def test_from_name_unknown_returns_none():
    assert Dialect.from_name("minimessage") is None
    assert Dialect.from_name("legacy-section") is None
    assert Dialect.from_name("") is None
    assert Dialect.from_name(None) is None


def test_only_ascii_whitespace_and_controls_are_trimmed():
    assert detect_dialect(' \t\r\n\x01{"text":"a"}\x1f ') == Dialect.JSON
    # Unicode spaces are content: the text no longer starts with a brace.
    assert detect_dialect('\u00a0{"text":"a"}') == Dialect.AUTO
    assert detect_dialect('{"text":"a"}\u2003') == Dialect.AUTO


def test_from_name_keeps_unicode_spaces():
    assert Dialect.from_name("\x01json\t") is Dialect.JSON
    assert Dialect.from_name("\u00a0json") is None
