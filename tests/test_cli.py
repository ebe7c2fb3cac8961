"""Tests for cli.py - JSON envelopes for each command."""

import json

import pandas as pd
import pytest

import cli


class TestParseCommand:

    def test_ok(self):
        out = cli.run(["parse", "--numeral", "MCMLIV"])
        assert out["status"] == "ok"
        assert out["data"]["value"] == 1954

    def test_error(self):
        out = cli.run(["parse", "--numeral", "IVX1"])
        assert out["status"] == "error"
        assert out["error"]["error_code"] == "INVALID_SYMBOL"

    def test_strict_flag(self):
        assert cli.run(["parse", "--numeral", "IIII"])["status"] == "ok"
        out = cli.run(["parse", "--numeral", "IIII", "--strict"])
        assert out["error"]["error_code"] == "NON_CANONICAL"


class TestFormatCommand:

    def test_ok(self):
        out = cli.run(["format", "--number", "3999"])
        assert out == {"status": "ok", "data": {"number": 3999, "numeral": "MMMCMXCIX"}}

    def test_out_of_range(self):
        out = cli.run(["format", "--number", "0"])
        assert out["status"] == "error"
        assert out["error"]["error_code"] == "RESULT_OUT_OF_RANGE"


class TestEvaluateCommand:

    def test_default_operation_is_add(self):
        out = cli.run(["evaluate", "--first", "X", "--second", "II"])
        assert out["data"]["numeral"] == "XII"
        assert out["data"]["operation"] == "add"

    @pytest.mark.parametrize("op,expected", [("-", "VIII"), ("*", "XX"), ("divide", "V")])
    def test_operations(self, op, expected):
        out = cli.run(["evaluate", "--first", "X", "--second", "II", "--op", op])
        assert out["data"]["numeral"] == expected

    def test_operand_error(self):
        out = cli.run(["evaluate", "--first", "X", "--second", "", "--op", "/"])
        assert out["error"]["error_code"] == "EMPTY_INPUT"
        assert out["error"]["operand"] == "second"

    def test_strict_from_config(self, tmp_path):
        config = tmp_path / "calculator_config.json"
        config.write_text(json.dumps({"strict_numerals": True}), encoding="utf-8")
        out = cli.run(["--config", str(config), "evaluate", "--first", "VX", "--second", "I"])
        assert out["error"]["error_code"] == "NON_CANONICAL"


class TestChartCommand:

    def test_rows(self):
        out = cli.run(["chart", "--start", "1", "--end", "3"])
        assert out["data"]["columns"] == ["Arabic", "Roman"]
        assert out["data"]["rows"] == [[1, "I"], [2, "II"], [3, "III"]]

    def test_defaults_from_config(self, tmp_path):
        config = tmp_path / "calculator_config.json"
        config.write_text(json.dumps({"chart_start": 5, "chart_end": 6}), encoding="utf-8")
        out = cli.run(["--config", str(config), "chart"])
        assert out["data"]["rows"] == [[5, "V"], [6, "VI"]]

    def test_export(self, tmp_path):
        target = tmp_path / "chart.csv"
        out = cli.run(["chart", "--start", "1", "--end", "5", "--out", str(target)])
        assert out["status"] == "ok"
        assert len(pd.read_csv(target)) == 5

    def test_invalid_range(self):
        out = cli.run(["chart", "--start", "9", "--end", "2"])
        assert out["error"]["error_code"] == "INVALID_RANGE"


class TestMain:

    def test_prints_json(self, capsys):
        cli.main(["format", "--number", "14"])
        printed = json.loads(capsys.readouterr().out)
        assert printed["data"]["numeral"] == "XIV"

    def test_exit_code_on_error(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main(["parse", "--numeral", ""])
        assert exc.value.code == 1
        printed = json.loads(capsys.readouterr().out)
        assert printed["status"] == "error"


def test_chart_with_mistyped_config_uses_default_range(tmp_path):
    config = tmp_path / "calculator_config.json"
    config.write_text(json.dumps({"chart_start": "5", "chart_end": 3}), encoding="utf-8")
    out = cli.run(["--config", str(config), "chart"])
    assert out["status"] == "ok"
    assert out["data"]["rows"] == [[1, "I"], [2, "II"], [3, "III"]]
