"""
Vanessa Automation MCP Server

A Model Context Protocol server that lets AI agents write, inspect and run
Gherkin scenarios for 1C:Enterprise applications through Vanessa Automation.
"""

__version__ = "1.0.0"

from .server import VanessaAutomationServer
from .config import ServerConfig
from .runner import VanessaRunner
from .feature_parser import FeatureDocument, ScenarioBlock, parse_feature, load_feature
from .step_generator import extract_steps, render_stubs
from .scenario_builder import ScenarioBuilder, ScenarioDraft
from .data_generators import generate_test_data

__all__ = [
    "VanessaAutomationServer",
    "ServerConfig",
    "VanessaRunner",
    "FeatureDocument",
    "ScenarioBlock",
    "parse_feature",
    "load_feature",
    "extract_steps",
    "render_stubs",
    "ScenarioBuilder",
    "ScenarioDraft",
    "generate_test_data",
]
