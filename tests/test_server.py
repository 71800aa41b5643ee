import json
import os
from unittest.mock import AsyncMock

import pytest
from mcp.types import TextContent, Tool

from vanessa_mcp.config import ServerConfig
from vanessa_mcp.feature_parser import parse_feature
from vanessa_mcp.runner import VanessaRunner
from vanessa_mcp.server import VanessaAutomationServer

from example_scenarios import LOGIN_FEATURE, MIXED_FEATURE


def payload(contents):
    assert len(contents) == 1
    assert isinstance(contents[0], TextContent)
    return json.loads(contents[0].text)


class TestVanessaAutomationServer:
    """Test suite for the Vanessa Automation MCP server"""

    @pytest.fixture
    def server(self, tmp_path):
        """Create server instance with a mocked runner"""
        config = ServerConfig(engine_path="/opt/va/vanessa", temp_dir=str(tmp_path))
        server = VanessaAutomationServer(config)

        server.runner = AsyncMock(spec=VanessaRunner)
        server.runner.run_draft.return_value = {"success": True, "stdout": "ok", "stderr": ""}
        server.runner.run_feature.return_value = {"success": True, "stdout": "ok", "stderr": ""}
        return server

    @pytest.fixture
    def feature_file(self, tmp_path):
        path = tmp_path / "features" / "login.feature"
        path.parent.mkdir()
        path.write_text(LOGIN_FEATURE, encoding="utf-8")
        return str(path)

    def test_list_tools(self, server):
        tools = server.list_tool_definitions()

        assert len(tools) == 15
        assert all(isinstance(tool, Tool) for tool in tools)
        tool_names = [tool.name for tool in tools]
        assert "run_scenario" in tool_names
        assert "assert" in tool_names
        assert "generate_test_data" in tool_names

    def test_tool_schema(self, server):
        tools = {tool.name: tool for tool in server.list_tool_definitions()}
        schema = tools["perform_action"].inputSchema

        assert schema["type"] == "object"
        assert sorted(schema["required"]) == ["action", "element"]
        assert "value" in schema["properties"]

    @pytest.mark.asyncio
    async def test_call_tool_unknown(self, server):
        result = payload(await server.handle_call("unknown_tool", {"param": "value"}))

        assert "Unknown tool" in result["error"]

    @pytest.mark.asyncio
    async def test_parse_feature(self, server, feature_file):
        result = payload(await server.handle_call("parse_feature", {"feature_path": feature_file}))

        assert result["features"] == [{
            "name": "Тест",
            "scenarios": [{
                "name": "Вход",
                "steps": [
                    "Дано Я на странице входа",
                    'Когда Я ввожу текст "qa" в поле "Имя"',
                    "Тогда окно открылось",
                ],
            }],
        }]

    @pytest.mark.asyncio
    async def test_parse_missing_feature(self, server, tmp_path):
        missing = str(tmp_path / "missing.feature")

        result = payload(await server.handle_call("parse_feature", {"feature_path": missing}))

        assert "Feature file not found" in result["error"]
        assert result["tool"] == "parse_feature"

    @pytest.mark.asyncio
    async def test_create_feature(self, server, tmp_path):
        path = tmp_path / "new" / "nested" / "catalog.feature"

        result = await server.create_feature(str(path), MIXED_FEATURE)

        assert path.read_text(encoding="utf-8") == MIXED_FEATURE
        assert result["features"] == 2
        assert result["scenarios"] == 3

    @pytest.mark.asyncio
    async def test_generate_steps(self, server, feature_file, tmp_path):
        output = tmp_path / "steps.bsl"

        result = await server.generate_steps(feature_file, str(output))

        assert result["steps"][0] == "Я на странице входа"
        assert result["output_path"] == str(output)
        assert output.read_text(encoding="utf-8") == result["definitions"]

    @pytest.mark.asyncio
    async def test_generate_steps_without_output(self, server, feature_file):
        result = await server.generate_steps(feature_file)

        assert "output_path" not in result
        assert "Процедура окно_открылось()" in result["definitions"]

    @pytest.mark.asyncio
    async def test_run_scenario(self, server, feature_file):
        await server.handle_call("run_scenario", {
            "feature_path": feature_file,
            "settings_path": "va.json",
        })

        server.runner.run_feature.assert_awaited_once_with(feature_file, "va.json", None)

    @pytest.mark.asyncio
    async def test_perform_action(self, server):
        result = payload(await server.handle_call("perform_action", {
            "action": "input",
            "element": "Наименование",
            "value": "Тест",
        }))

        draft, prefix = server.runner.run_draft.call_args.args
        assert prefix == "action"
        assert draft.steps[0] == 'Когда Я ввожу текст "Тест" в поле "Наименование"'
        assert result["success"] is True

    @pytest.mark.asyncio
    async def test_perform_action_missing_value(self, server):
        result = payload(await server.handle_call("perform_action", {
            "action": "select",
            "element": "Вид",
        }))

        assert "Value is required for select action" in result["error"]
        assert not server.runner.run_draft.called

    @pytest.mark.asyncio
    async def test_invalid_arguments_rejected(self, server):
        result = payload(await server.handle_call("perform_action", {
            "action": "hover",
            "element": "Вид",
        }))

        assert "error" in result
        assert not server.runner.run_draft.called

    @pytest.mark.asyncio
    async def test_explore_form_round_trip(self, server):
        await server.handle_call("explore_form", {"form_name": "Контрагенты"})

        draft, prefix = server.runner.run_draft.call_args.args
        features = parse_feature(draft.render())
        assert prefix == "explore"
        assert len(features[0].scenarios[0].steps) == 3
        assert "глубиной 2" in draft.steps[1]

    @pytest.mark.asyncio
    async def test_take_screenshot(self, server, tmp_path):
        result = await server.take_screenshot("shot.png")

        expected = os.path.join(str(tmp_path), "shot.png")
        draft, _ = server.runner.run_draft.call_args.args
        assert result["screenshot_path"] == expected
        assert expected in draft.steps[0]

    @pytest.mark.asyncio
    async def test_start_recording_default_path(self, server):
        result = await server.start_recording("demo")

        assert result["recording_path"] == os.path.join(os.getcwd(), "recording_demo.feature")

    @pytest.mark.asyncio
    async def test_wait_for(self, server):
        await server.handle_call("wait_for", {"condition": "time", "timeout": 3})

        draft, prefix = server.runner.run_draft.call_args.args
        assert prefix == "wait"
        assert draft.steps == ["Когда Пауза 3"]

    @pytest.mark.asyncio
    async def test_get_table_data(self, server):
        await server.handle_call("get_table_data", {"table_name": "Список", "columns": ["Код"]})

        draft, _ = server.runner.run_draft.call_args.args
        assert draft.steps[0] == 'Когда Я получаю данные из таблицы "Список" для колонок "Код"'

    @pytest.mark.asyncio
    async def test_assert_tool(self, server):
        await server.handle_call("assert", {"type": "visible", "element": "Кнопка"})

        draft, prefix = server.runner.run_draft.call_args.args
        assert prefix == "assert"
        assert draft.steps == ['Тогда элемент "Кнопка" видимый']

    @pytest.mark.asyncio
    async def test_navigate(self, server):
        await server.handle_call("navigate", {"target": "home"})

        draft, _ = server.runner.run_draft.call_args.args
        assert draft.steps == ["Когда Я перехожу на главную страницу"]

    @pytest.mark.asyncio
    async def test_get_elements(self, server):
        await server.handle_call("get_elements", {"element_type": "button"})

        draft, prefix = server.runner.run_draft.call_args.args
        assert prefix == "elements"
        assert draft.steps[0] == 'Когда Я получаю список элементов типа "button"'

    @pytest.mark.asyncio
    async def test_get_standard_steps(self, server):
        result = payload(await server.handle_call("get_standard_steps", {
            "category": "Navigation",
            "language": "en",
        }))

        assert result["steps"][0] == 'I open navigation link "<path>"'
        assert len(result["steps"]) == 5

    @pytest.mark.asyncio
    async def test_generate_test_data(self, server):
        result = payload(await server.handle_call("generate_test_data", {
            "data_type": "snils",
            "count": 3,
        }))

        assert result["data_type"] == "snils"
        assert len(result["values"]) == 3

    @pytest.mark.asyncio
    async def test_engine_error_reported(self, server, feature_file):
        server.runner.run_feature.side_effect = OSError("engine crashed")

        result = payload(await server.handle_call("run_scenario", {"feature_path": feature_file}))

        assert result["error"] == "engine crashed"

    @pytest.mark.asyncio
    async def test_multiline_argument_not_run(self, server):
        result = payload(await server.handle_call("assert", {
            "type": "exists",
            "element": "Поле\nИ лишний шаг",
        }))

        assert "Line breaks are not allowed in element" in result["error"]
        assert not server.runner.run_draft.called
