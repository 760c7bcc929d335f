"""Tests for operation-specific Rich renderers."""

from merryctl.output.renderers import render_quiet, render_result
from merryctl.services.result import ServiceError, ServiceResult

# ── Helpers ───────────────────────────────────────────────────────────


def _ok(op: str, **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str, code: str, message: str, **detail: object) -> ServiceResult:
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=dict(detail)),
    )


def _bulk(**overrides: object) -> ServiceResult:
    data: dict[str, object] = {
        "action": "start",
        "containers": ["bitcoind", "faucet"],
        "count": 2,
        "groups": ["chains"],
        "requested": ["chains", "ghost"],
    }
    data.update(overrides)
    return _ok("enable", **data)


# ── Error rendering ──────────────────────────────────────────────────


class TestErrorRenderer:
    def test_basic_error(self) -> None:
        output = render_result(_err("enable", "NO_GROUPS", "No groups specified"))
        assert "ERROR" in output
        assert "enable" in output
        assert "No groups specified" in output

    def test_orchestrator_output_always_shown(self) -> None:
        result = _err(
            "disable",
            "ORCHESTRATOR_FAILED",
            "Failed to stop containers: exit status 1",
            command="docker compose stop api",
            output="no such service: api",
        )
        output = render_result(result)
        assert "no such service: api" in output
        assert "docker compose stop api" not in output

    def test_verbose_shows_detail(self) -> None:
        result = _err("enable", "CONFIG_MALFORMED", "Bad", path="/x/container-groups.yml")
        output = render_result(result, verbose=True)
        assert "detail" in output
        assert "path: /x/container-groups.yml" in output

    def test_no_error_object(self) -> None:
        output = render_result(ServiceResult(ok=False, op="test"))
        assert "Unknown error" in output


# ── Bulk renderer ─────────────────────────────────────────────────────


class TestBulkRenderer:
    def test_enable_summary(self) -> None:
        output = render_result(_bulk())
        assert "OK" in output
        assert "Started 2 containers from groups: chains" in output
        assert "    - bitcoind" in output
        assert "    - faucet" in output

    def test_disable_summary(self) -> None:
        result = ServiceResult(
            ok=True,
            op="disable",
            data={"action": "stop", "containers": ["api"], "count": 1, "groups": ["api"]},
        )
        assert "Stopped 1 containers from groups: api" in render_result(result)

    def test_nothing_matched(self) -> None:
        result = _bulk(
            containers=[],
            count=0,
            message="No containers found matching the specified groups",
        )
        output = render_result(result)
        assert "No containers found matching the specified groups" in output
        assert "Started" not in output

    def test_verbose_shows_requested(self) -> None:
        output = render_result(_bulk(), verbose=True)
        assert "requested: chains, ghost" in output

    def test_bracketed_names_are_literal(self) -> None:
        output = render_result(_bulk(containers=["svc[bold]"], count=1))
        assert "svc[bold]" in output


# ── List renderer ─────────────────────────────────────────────────────


class TestListGroupsRenderer:
    def test_groups_with_status(self) -> None:
        result = _ok(
            "list_groups",
            count=2,
            groups=[
                {
                    "name": "chains",
                    "description": "Local chain nodes",
                    "count": 2,
                    "containers": [
                        {"name": "bitcoind", "status": "running"},
                        {"name": "faucet", "status": "stopped"},
                    ],
                },
                {"name": "empty", "description": "", "count": 0, "containers": []},
            ],
        )
        output = render_result(result)
        assert output.startswith("Container Groups:\n================")
        assert "CHAINS:" in output
        assert "  Description: Local chain nodes" in output
        assert "  Containers (2):" in output
        assert "    - bitcoind [running]" in output
        assert "    - faucet [stopped]" in output
        assert "EMPTY:" in output
        assert "  Containers: None found" in output

    def test_no_groups(self) -> None:
        output = render_result(_ok("list_groups", count=0, groups=[]))
        assert "No groups configured" in output


# ── Fund renderer ─────────────────────────────────────────────────────


class TestFundRenderer:
    def test_bitcoin(self) -> None:
        result = _ok(
            "fund",
            chain="bitcoin",
            address="bcrt1q",
            tx_id="abc",
            explorer_url="http://localhost:5050/tx/abc",
        )
        assert "Successfully submitted at http://localhost:5050/tx/abc" in render_result(result)

    def test_starknet(self) -> None:
        result = _ok(
            "fund",
            chain="starknet",
            address="0x1",
            tx_hash="0xfeed",
            new_balance="2000",
            unit="FRI",
        )
        output = render_result(result)
        assert "TxHash: 0xfeed. New Balance: 2000 FRI." in output


class TestGenericRenderer:
    def test_unknown_op(self) -> None:
        output = render_result(_ok("custom", key="value", nested={"a": 1}))
        assert "custom" in output
        assert "key: value" in output
        assert 'nested: {"a":1}' in output


# ── Quiet mode ────────────────────────────────────────────────────────


class TestRenderQuiet:
    def test_containers(self) -> None:
        assert render_quiet(_bulk()) == "bitcoind\nfaucet"

    def test_nothing_matched_is_empty(self) -> None:
        assert render_quiet(_bulk(containers=[], count=0)) == ""

    def test_list_groups(self) -> None:
        result = _ok("list_groups", groups=[{"name": "api"}, {"name": "chains"}])
        assert render_quiet(result) == "api\nchains"

    def test_other_op(self) -> None:
        assert render_quiet(_ok("fund", chain="bitcoin")) == "OK: fund"

    def test_error(self) -> None:
        result = _err("enable", "NO_GROUPS", "No groups specified")
        assert render_quiet(result) == "ERROR: enable — No groups specified"
