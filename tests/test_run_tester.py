"""Tests for the command line front end."""

import io

import pytest

from re_tester.reference import MODIFIERS, REFERENCE, format_reference
from re_tester.run_tester import INTERACTIVE_HELP, main, parse_arguments


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("RE_TESTER_ENGINE", raising=False)
    monkeypatch.delenv("RE_TESTER_TIMEOUT", raising=False)


class TestParseArguments:

    def test_pattern_and_subject(self):
        args = parse_arguments(["a+", "baa"])

        assert args.pattern == "a+"
        assert args.subject == "baa"
        assert args.engine is None
        assert not hasattr(args, "timeout")

    def test_timeout_none(self):
        assert parse_arguments(["a", "--timeout", "none"]).timeout is None

    def test_pattern_required_for_one_shot(self, capsys):
        with pytest.raises(SystemExit):
            parse_arguments([])

        assert "PATTERN is required" in capsys.readouterr().err

    def test_unknown_engine_is_rejected(self):
        with pytest.raises(SystemExit):
            parse_arguments(["a", "--engine", "pcre"])


class TestOneShot:

    def test_prints_report(self, capsys):
        assert main(["(a)(b)?", "a", "--quiet"]) == 0

        assert capsys.readouterr().out == (
            "Some(Captures({\n"
            '    0: Some("a"),\n'
            '    1: Some("a"),\n'
            "    2: None,\n"
            "})),\n"
        )

    def test_no_match(self, capsys):
        assert main(["z", "abc", "--engine", "re"]) == 0

        assert capsys.readouterr().out == "None\n"

    def test_compile_error_is_printed_not_raised(self, capsys):
        assert main(["(", "abc"]) == 0

        assert "missing )" in capsys.readouterr().out

    def test_subject_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("foo\nbar\n"))

        assert main(["(?m)^(\\w+)$", "--engine", "re"]) == 0

        out = capsys.readouterr().out
        assert out.count("Some(Captures(") == 2
        assert '    1: Some("bar"),' in out

    def test_bad_environment_fails_cleanly(self, capsys, monkeypatch):
        monkeypatch.setenv("RE_TESTER_TIMEOUT", "-3")

        assert main(["a", "a"]) == 1

        assert "Failed to initialize engine" in capsys.readouterr().err

    def test_reference(self, capsys):
        assert main(["--reference"]) == 0

        out = capsys.readouterr().out
        assert out == format_reference()

    def test_log_file(self, tmp_path, capsys):
        log_file = tmp_path / "logs" / "tester.log"

        assert main(["a", "a", "--verbose", "--log-file", str(log_file)]) == 0

        assert log_file.exists()


class TestInteractive:

    def _run(self, monkeypatch, commands, *argv):
        monkeypatch.setattr("sys.stdin", io.StringIO(commands))
        return main(["--interactive", "--quiet", *argv])

    def test_edits_print_updated_reports(self, capsys, monkeypatch):
        assert self._run(monkeypatch, ":p a\n:s aa\n:q\n") == 0

        out = capsys.readouterr().out
        assert out == (
            INTERACTIVE_HELP
            + "None\n"
            + 'Some(Captures({\n    0: Some("a"),\n})),\n'
            + 'Some(Captures({\n    0: Some("a"),\n})),\n'
        )

    def test_initial_pattern_and_subject(self, capsys, monkeypatch):
        assert self._run(monkeypatch, ":q\n", "z", "abc") == 0

        assert capsys.readouterr().out == "None\n" + INTERACTIVE_HELP

    def test_unchanged_report_prints_nothing(self, capsys, monkeypatch):
        self._run(monkeypatch, ":p z\n:s abc\n:s abd\n")

        out = capsys.readouterr().out
        assert out == INTERACTIVE_HELP + "None\n"

    def test_append_and_clear_subject(self, capsys, monkeypatch):
        self._run(monkeypatch, ":p foo\n:a foo\n:c\n")

        out = capsys.readouterr().out
        assert out == (
            INTERACTIVE_HELP
            + "None\n"
            + 'Some(Captures({\n    0: Some("foo"),\n})),\n'
            + "None\n"
        )

    def test_append_builds_multiline_subject(self, capsys, monkeypatch):
        self._run(monkeypatch, ":p (?m)^(\\w+)$\n:a foo\n:a bar\n")

        out = capsys.readouterr().out
        assert '    1: Some("bar"),' in out
        assert out.endswith('Some(Captures({\n    0: Some("foo"),\n    1: Some("foo"),\n})),\n'
                            'Some(Captures({\n    0: Some("bar"),\n    1: Some("bar"),\n})),\n')

    def test_reference_and_help(self, capsys, monkeypatch):
        self._run(monkeypatch, ":r\n:h\n")

        out = capsys.readouterr().out
        assert out == INTERACTIVE_HELP + format_reference() + INTERACTIVE_HELP

    def test_unknown_command_is_logged(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(":x\n"))

        assert main(["--interactive"]) == 0

        assert "Unknown command" in capsys.readouterr().err

    def test_quiet_keeps_warnings(self, capsys, monkeypatch):
        self._run(monkeypatch, ":x\n")

        assert "Unknown command" in capsys.readouterr().err

    def test_quiet_drops_info(self, capsys, monkeypatch):
        self._run(monkeypatch, ":p a\n:p a\n")

        assert "Input unchanged" not in capsys.readouterr().err

    def test_info_is_shown_without_quiet(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO(":p a\n:p a\n"))

        main(["--interactive"])

        assert "Input unchanged" in capsys.readouterr().err


def test_reference_tables():
    codes = [c.code for c in REFERENCE]

    assert "(a|z)" in codes
    assert "a{3,5}" in codes
    assert [m.code for m in MODIFIERS] == ["u", "i", "m", "s", "x"]
    assert "Modifiers (enable: (?a), disable: (?-a)):" in format_reference()
