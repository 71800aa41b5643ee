import asyncio
import json
import logging
import os
import time
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool

from .config import ServerConfig
from .data_generators import generate_test_data
from .feature_parser import parse_feature, read_feature_text
from .runner import VanessaRunner
from .scenario_builder import ScenarioBuilder
from .schemas import TOOL_DESCRIPTIONS, TOOL_SCHEMAS
from .standard_steps import get_standard_steps
from .step_generator import extract_steps, render_stubs, save_stubs

logger = logging.getLogger(__name__)


class VanessaAutomationServer:
    def __init__(self, config: Optional[ServerConfig] = None, runner: Optional[VanessaRunner] = None):
        self.config = config or ServerConfig()
        self.server = Server("vanessa-automation-mcp")
        self.runner = runner or VanessaRunner(self.config)
        self.builder = ScenarioBuilder()
        self.setup_tools()

    def setup_tools(self):
        """Register available tools with MCP protocol"""

        @self.server.list_tools()
        async def list_tools() -> List[Tool]:
            return self.list_tool_definitions()

        @self.server.call_tool()
        async def call_tool(name: str, arguments: Dict) -> List[TextContent]:
            return await self.handle_call(name, arguments)

    def list_tool_definitions(self) -> List[Tool]:
        return [
            Tool(
                name=name,
                description=TOOL_DESCRIPTIONS[name],
                inputSchema=schema.model_json_schema(),
            )
            for name, schema in TOOL_SCHEMAS.items()
        ]

    async def handle_call(self, name: str, arguments: Optional[Dict]) -> List[TextContent]:
        """Run a tool and wrap its result (or error) as JSON text"""
        try:
            result = await self.dispatch(name, arguments or {})
        except Exception as e:
            logger.error(f"Tool {name} failed: {e}")
            result = {
                "error": str(e),
                "tool": name,
                "arguments": arguments,
            }

        return [TextContent(
            type="text",
            text=json.dumps(result, indent=2, ensure_ascii=False)
        )]

    async def dispatch(self, name: str, arguments: Dict[str, Any]) -> Dict:
        schema = TOOL_SCHEMAS.get(name)
        if schema is None:
            return {"error": f"Unknown tool: {name}"}

        args = schema.model_validate(arguments)
        logger.info(f"Calling tool {name}")

        if name == "run_scenario":
            return await self.run_scenario(args.feature_path, args.settings_path, args.additional_params)
        elif name == "create_feature":
            return await self.create_feature(args.file_path, args.content)
        elif name == "parse_feature":
            return await self.parse_feature(args.feature_path)
        elif name == "generate_steps":
            return await self.generate_steps(args.feature_path, args.output_path)
        elif name == "explore_form":
            return await self.explore_form(args.form_name, args.depth)
        elif name == "get_elements":
            return await self.get_elements(args.element_type, args.parent_element)
        elif name == "perform_action":
            return await self.perform_action(args.action, args.element, args.value)
        elif name == "get_standard_steps":
            return await self.get_standard_steps(args.category, args.language)
        elif name == "take_screenshot":
            return await self.take_screenshot(args.file_name, args.full_page, args.element)
        elif name == "wait_for":
            return await self.wait_for(args.condition, args.target, args.timeout)
        elif name == "get_table_data":
            return await self.get_table_data(args.table_name, args.columns, args.row_count)
        elif name == "start_recording":
            return await self.start_recording(args.name, args.output_path)
        elif name == "assert":
            return await self.assert_condition(args.type, args.element, args.expected)
        elif name == "navigate":
            return await self.navigate(args.target)
        else:
            return await self.generate_test_data(args.data_type, args.count, args.format)

    async def run_scenario(
        self,
        feature_path: str,
        settings_path: Optional[str] = None,
        additional_params: Optional[str] = None,
    ) -> Dict:
        return await self.runner.run_feature(feature_path, settings_path, additional_params)

    async def create_feature(self, file_path: str, content: str) -> Dict:
        """Write a feature file, creating parent directories"""
        normalized = os.path.normpath(file_path)
        directory = os.path.dirname(normalized)
        if directory:
            os.makedirs(directory, exist_ok=True)

        with open(normalized, "w", encoding="utf-8") as f:
            f.write(content)

        features = parse_feature(content)
        return {
            "file_path": normalized,
            "features": len(features),
            "scenarios": sum(len(feature.scenarios) for feature in features),
        }

    async def parse_feature(self, feature_path: str) -> Dict:
        features = parse_feature(read_feature_text(feature_path))
        return {
            "feature_path": os.path.normpath(feature_path),
            "features": [feature.to_dict() for feature in features],
        }

    async def generate_steps(self, feature_path: str, output_path: Optional[str] = None) -> Dict:
        """Extract unique steps and render 1C procedure stubs for them"""
        steps = extract_steps(read_feature_text(feature_path))
        definitions = render_stubs(steps)

        result = {"steps": steps, "definitions": definitions}
        if output_path:
            result["output_path"] = save_stubs(definitions, output_path)
        return result

    async def explore_form(self, form_name: str, depth: int = 2) -> Dict:
        draft = self.builder.explore_form(form_name, depth)
        result = await self.runner.run_draft(draft, "explore")
        result["form_name"] = form_name
        return result

    async def get_elements(self, element_type: Optional[str] = None, parent_element: Optional[str] = None) -> Dict:
        draft = self.builder.get_elements(element_type, parent_element)
        return await self.runner.run_draft(draft, "elements")

    async def perform_action(self, action: str, element: str, value: Optional[str] = None) -> Dict:
        draft = self.builder.perform_action(action, element, value)
        return await self.runner.run_draft(draft, "action")

    async def get_standard_steps(self, category: Optional[str] = None, language: str = "ru") -> Dict:
        return {
            "category": category,
            "language": language,
            "steps": get_standard_steps(category, language),
        }

    async def take_screenshot(
        self,
        file_name: Optional[str] = None,
        full_page: bool = False,
        element: Optional[str] = None,
    ) -> Dict:
        screenshot_name = file_name or f"screenshot_{int(time.time() * 1000)}.png"
        screenshot_path = os.path.join(self.config.temp_dir, screenshot_name)

        draft = self.builder.take_screenshot(screenshot_path, full_page, element)
        result = await self.runner.run_draft(draft, "screenshot")
        result["screenshot_path"] = screenshot_path
        return result

    async def wait_for(self, condition: str, target: Optional[str] = None, timeout: int = 10) -> Dict:
        draft = self.builder.wait_for(condition, target, timeout)
        return await self.runner.run_draft(draft, "wait")

    async def get_table_data(
        self,
        table_name: str,
        columns: Optional[List[str]] = None,
        row_count: Optional[int] = None,
    ) -> Dict:
        draft = self.builder.get_table_data(table_name, columns, row_count)
        return await self.runner.run_draft(draft, "table")

    async def start_recording(self, name: str, output_path: Optional[str] = None) -> Dict:
        recording_path = output_path or os.path.join(os.getcwd(), f"recording_{name}.feature")

        draft = self.builder.start_recording(name, recording_path)
        result = await self.runner.run_draft(draft, "record")
        result["recording_path"] = recording_path
        return result

    async def assert_condition(self, assertion_type: str, element: str, expected: Optional[str] = None) -> Dict:
        draft = self.builder.assert_condition(assertion_type, element, expected)
        return await self.runner.run_draft(draft, "assert")

    async def navigate(self, target: str) -> Dict:
        draft = self.builder.navigate(target)
        return await self.runner.run_draft(draft, "navigate")

    async def generate_test_data(self, data_type: str, count: int = 1, format: Optional[str] = None) -> Dict:
        return {
            "data_type": data_type,
            "values": generate_test_data(data_type, count, format),
        }

    async def run(self):
        """Start the MCP server"""
        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                self.server.create_initialization_options()
            )


def main():
    """Entry point for the MCP server"""
    import sys

    load_dotenv()
    config = ServerConfig.from_env()

    # Logs go to stderr, stdout carries the MCP stream
    logging.basicConfig(
        level=config.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    server = VanessaAutomationServer(config)

    try:
        asyncio.run(server.run())
    except KeyboardInterrupt:
        logging.info("Server stopped by user")
    except Exception as e:
        logging.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
