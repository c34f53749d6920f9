"""Tests for unit file parsing and validation."""

from pathlib import Path

import pytest

from plato_installer.lib.units import parse_unit, validate_unit


class TestParseUnit:
    def test_sections_and_repeated_keys(self):
        text = (
            "# comment\n"
            "[Unit]\n"
            "Description=Plato\n"
            "\n"
            "[Service]\n"
            "ExecStartPre=/bin/a\n"
            "ExecStartPre=/bin/b\n"
            "ExecStart=/home/root/plato/plato.sh\n"
        )
        sections = parse_unit(text)
        assert sections["Unit"]["Description"] == ["Plato"]
        assert sections["Service"]["ExecStartPre"] == ["/bin/a", "/bin/b"]

    def test_line_continuation(self):
        sections = parse_unit("[Service]\nExecStart=/bin/plato \\\n  --fullscreen\n")
        assert sections["Service"]["ExecStart"] == ["/bin/plato --fullscreen"]

    def test_value_may_contain_equals(self):
        sections = parse_unit("[Service]\nEnvironment=KEY=value\n")
        assert sections["Service"]["Environment"] == ["KEY=value"]

    def test_entry_before_section(self):
        with pytest.raises(ValueError, match="outside of a section"):
            parse_unit("ExecStart=/bin/plato\n")

    def test_line_without_equals(self):
        with pytest.raises(ValueError, match="line 2"):
            parse_unit("[Service]\nnot a setting\n")


class TestValidateUnit:
    def test_missing_service(self):
        with pytest.raises(ValueError, match=r"missing \[Service\]"):
            validate_unit("[Unit]\nDescription=x\n", "plato.service")

    def test_empty_exec_start(self):
        with pytest.raises(ValueError, match="no ExecStart"):
            validate_unit("[Service]\nExecStart=\n", "plato.service")

    def test_error_names_origin(self):
        with pytest.raises(ValueError, match="^/x/plato.service: "):
            validate_unit("junk\n", "/x/plato.service")

    def test_bundled_unit_is_loadable(self):
        bundled = Path(__file__).resolve().parent.parent / "plato.service"
        sections = validate_unit(bundled.read_text(encoding="utf-8"), str(bundled))
        assert sections["Service"]["ExecStart"]
