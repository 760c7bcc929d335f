"""Tests for output mode dispatch."""

import json

from merryctl.output.formatters import OutputSettings, format_result
from merryctl.services.result import ServiceResult

_RESULT = ServiceResult(
    ok=True,
    op="enable",
    data={
        "action": "start",
        "containers": ["api", "bitcoind"],
        "count": 2,
        "groups": ["api", "chains"],
        "requested": ["api", "chains"],
    },
    warnings=["Group 'ghost' not found"],
)


class TestFormatResult:
    def test_default_is_human(self) -> None:
        output = format_result(_RESULT)
        assert "Started 2 containers from groups: api, chains" in output

    def test_json(self) -> None:
        output = format_result(_RESULT, settings=OutputSettings(json_output=True))
        parsed = json.loads(output)
        assert parsed["ok"] is True
        assert parsed["data"]["containers"] == ["api", "bitcoind"]
        assert parsed["warnings"] == ["Group 'ghost' not found"]

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(_RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "enable"

    def test_quiet(self) -> None:
        output = format_result(_RESULT, settings=OutputSettings(quiet=True))
        assert output == "api\nbitcoind"

    def test_verbose_passed_through(self) -> None:
        output = format_result(_RESULT, settings=OutputSettings(verbose=True))
        assert "requested: api, chains" in output
