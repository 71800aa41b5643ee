import os
import asyncio
from unittest.mock import AsyncMock, Mock, patch

import pytest

from vanessa_mcp.config import ServerConfig
from vanessa_mcp.errors import EngineNotConfiguredError, FeatureNotFoundError
from vanessa_mcp.runner import VanessaRunner
from vanessa_mcp.scenario_builder import ScenarioBuilder

from example_scenarios import LOGIN_FEATURE


def make_process(stdout=b"", stderr=b"", returncode=0):
    process = AsyncMock()
    process.communicate.return_value = (stdout, stderr)
    process.returncode = returncode
    return process


class TestVanessaRunner:
    """Test suite for the Vanessa Automation process runner"""

    @pytest.fixture
    def runner(self, tmp_path):
        config = ServerConfig(engine_path="/opt/va/vanessa", temp_dir=str(tmp_path))
        return VanessaRunner(config)

    @pytest.fixture
    def feature_file(self, tmp_path):
        path = tmp_path / "login.feature"
        path.write_text(LOGIN_FEATURE, encoding="utf-8")
        return str(path)

    def test_build_command(self, runner):
        command = runner.build_command("a.feature", "va.json", '--quiet --tag "smoke test"')

        assert command == [
            "/opt/va/vanessa", "--run-scenarios", "a.feature",
            "--settings", "va.json", "--quiet", "--tag", "smoke test",
        ]

    def test_build_command_without_engine(self):
        with pytest.raises(EngineNotConfiguredError):
            VanessaRunner(ServerConfig()).build_command("a.feature")

    @pytest.mark.asyncio
    async def test_run_feature(self, runner, feature_file):
        process = make_process("Пройдено".encode("utf-8"), b"", 0)

        with patch("vanessa_mcp.runner.asyncio.create_subprocess_exec",
                   AsyncMock(return_value=process)) as mock_exec:
            result = await runner.run_feature(feature_file)

        args = mock_exec.call_args.args
        assert args[:3] == ("/opt/va/vanessa", "--run-scenarios", os.path.normpath(feature_file))
        assert result["success"] is True
        assert result["stdout"] == "Пройдено"
        assert result["stderr"] == ""

    @pytest.mark.asyncio
    async def test_run_feature_failure_output_passed_through(self, runner, feature_file):
        process = make_process(b"", b"\xffboom", 1)

        with patch("vanessa_mcp.runner.asyncio.create_subprocess_exec",
                   AsyncMock(return_value=process)):
            result = await runner.run_feature(feature_file)

        assert result["success"] is False
        assert result["returncode"] == 1
        assert result["stderr"].endswith("boom")

    @pytest.mark.asyncio
    async def test_cancelled_run_kills_engine(self, runner, feature_file):
        process = make_process()
        process.communicate.side_effect = asyncio.CancelledError()
        process.kill = Mock()

        with patch("vanessa_mcp.runner.asyncio.create_subprocess_exec",
                   AsyncMock(return_value=process)):
            with pytest.raises(asyncio.CancelledError):
                await runner.run_feature(feature_file)

        process.kill.assert_called_once()

    @pytest.mark.asyncio
    async def test_missing_feature(self, runner, tmp_path):
        with patch("vanessa_mcp.runner.asyncio.create_subprocess_exec") as mock_exec:
            with pytest.raises(FeatureNotFoundError):
                await runner.run_feature(str(tmp_path / "missing.feature"))

        assert not mock_exec.called

    @pytest.mark.asyncio
    async def test_engine_not_configured(self, feature_file):
        runner = VanessaRunner(ServerConfig())

        with pytest.raises(EngineNotConfiguredError):
            await runner.run_feature(feature_file)

    @pytest.mark.asyncio
    async def test_run_draft_removes_temp_file(self, runner, tmp_path):
        draft = ScenarioBuilder().navigate("home")
        seen = {}

        async def fake_exec(*command, **kwargs):
            path = command[2]
            with open(path, encoding="utf-8") as f:
                seen["text"] = f.read()
            seen["path"] = path
            return make_process(b"ok")

        with patch("vanessa_mcp.runner.asyncio.create_subprocess_exec", side_effect=fake_exec):
            result = await runner.run_draft(draft, "navigate")

        assert seen["text"] == draft.render()
        assert os.path.basename(seen["path"]).startswith("navigate_")
        assert seen["path"].endswith(".feature")
        assert not os.path.exists(seen["path"])
        assert result["scenario"] == draft.render()

    @pytest.mark.asyncio
    async def test_run_draft_cleans_up_on_error(self, runner, tmp_path):
        draft = ScenarioBuilder().navigate("back")

        with patch("vanessa_mcp.runner.asyncio.create_subprocess_exec",
                   AsyncMock(side_effect=OSError("cannot start"))):
            with pytest.raises(OSError):
                await runner.run_draft(draft, "navigate")

        assert list(tmp_path.glob("*.feature")) == []


class TestServerConfig:

    def test_from_env(self):
        config = ServerConfig.from_env({
            "VANESSA_AUTOMATION_PATH": "C:\\VA\\vanessa.epf",
            "TEMP": "/var/tmp",
            "VANESSA_MCP_LOG_LEVEL": "debug",
        })

        assert config.engine_path == "C:\\VA\\vanessa.epf"
        assert config.temp_dir == "/var/tmp"
        assert config.log_level == "DEBUG"
        assert config.output_encoding == "utf-8"

    def test_defaults(self):
        config = ServerConfig.from_env({})

        assert config.engine_path == ""
        assert config.log_level == "INFO"
