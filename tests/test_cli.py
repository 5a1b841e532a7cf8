import io

from motdtext import config
from motdtext.cli import main


def test_detect_prints_dialect(capsys):
    assert main(["detect", "&cHello"]) == 0
    assert capsys.readouterr().out.strip() == "legacy_ampersand"


def test_parse_prints_legacy_form(capsys):
    assert main(["parse", "&#FF00FFHello"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "§x§f§f§0§0§f§fHello\n"
    assert "dialect=hex_ampersand fallback=false" in captured.err


def test_parse_plain_output_reports_fallback(capsys):
    assert main(["parse", "--format", "MINI_MESSAGE", "-o", "plain", "<red>hi</red"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "<red>hi</red\n"
    assert "dialect=mini_message fallback=true" in captured.err


def test_parse_json_output(capsys):
    assert main(["parse", "-o", "json", "just text"]) == 0
    assert capsys.readouterr().out.strip() == '{"text":"just text"}'


def test_parse_unknown_format_exits_with_2(capsys):
    assert main(["parse", "--format", "html", "x"]) == 2
    assert "Unknown format" in capsys.readouterr().err


def test_parse_reads_file_and_strips_final_newline(tmp_path, capsys):
    motd = tmp_path / "motd.txt"
    motd.write_text("&aWelcome\n&7to the server\n", encoding="utf-8")
    assert main(["parse", "--file", str(motd), "-o", "plain"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Welcome\nto the server\n"
    assert "dialect=legacy_ampersand" in captured.err


def test_detect_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO('{"text":"hi"}'))
    assert main(["detect", "-"]) == 0
    assert capsys.readouterr().out.strip() == "json"


def test_default_dialect_from_environment(monkeypatch):
    monkeypatch.setenv("MOTDTEXT_DEFAULT_DIALECT", "legacy_section")
    assert config._default_dialect().value == "legacy_section"

    monkeypatch.setenv("MOTDTEXT_DEFAULT_DIALECT", "nonsense")
    assert config._default_dialect().value == "auto"

    monkeypatch.delenv("MOTDTEXT_DEFAULT_DIALECT")
    assert config._default_dialect().value == "auto"
