"""Argument models for the MCP tools"""

from typing import Dict, List, Literal, Optional, Type

from pydantic import BaseModel, Field


class RunScenarioArgs(BaseModel):
    feature_path: str = Field(description="Path to the feature file with Gherkin scenarios")
    settings_path: Optional[str] = Field(None, description="Path to VA configuration file")
    additional_params: Optional[str] = Field(None, description="Additional command line parameters")


class CreateFeatureArgs(BaseModel):
    file_path: str = Field(description="Path where to save the feature file")
    content: str = Field(description="Gherkin content of the feature file")


class ParseFeatureArgs(BaseModel):
    feature_path: str = Field(description="Path to the feature file to parse")


class GenerateStepsArgs(BaseModel):
    feature_path: str = Field(description="Path to the feature file")
    output_path: Optional[str] = Field(None, description="Path for generated step definitions")


class ExploreFormArgs(BaseModel):
    form_name: str = Field(description="Name or title of the 1C form to explore")
    depth: int = Field(2, ge=1, description="Depth of element exploration")


class GetElementsArgs(BaseModel):
    element_type: Optional[str] = Field(None, description="Type of elements to get (button, field, table, etc.)")
    parent_element: Optional[str] = Field(None, description="Parent element to search within")


class PerformActionArgs(BaseModel):
    action: Literal["click", "input", "select", "check", "doubleclick", "rightclick"] = Field(
        description="Action to perform"
    )
    element: str = Field(description="Element identifier or path")
    value: Optional[str] = Field(None, description="Value for input/select actions")


class GetStandardStepsArgs(BaseModel):
    category: Optional[str] = Field(None, description="Category of steps (UI, Navigation, Validation, Data)")
    language: Literal["ru", "en"] = Field("ru", description="Language for step descriptions")


class TakeScreenshotArgs(BaseModel):
    file_name: Optional[str] = Field(None, description="Name for the screenshot file")
    full_page: bool = Field(False, description="Capture full page or just visible area")
    element: Optional[str] = Field(None, description="Specific element to capture")


class WaitForArgs(BaseModel):
    condition: Literal["element", "text", "window", "time"] = Field(description="What to wait for")
    target: Optional[str] = Field(None, description="Element/text/window to wait for")
    timeout: int = Field(10, ge=0, description="Timeout in seconds")


class GetTableDataArgs(BaseModel):
    table_name: str = Field(description="Name of the table to extract data from")
    columns: Optional[List[str]] = Field(None, description="Specific columns to extract")
    row_count: Optional[int] = Field(None, ge=1, description="Number of rows to extract")


class StartRecordingArgs(BaseModel):
    name: str = Field(description="Name for the recording session")
    output_path: Optional[str] = Field(None, description="Path to save the recorded scenario")


class AssertArgs(BaseModel):
    type: Literal["exists", "value", "enabled", "visible", "count"] = Field(description="Type of assertion")
    element: str = Field(description="Element to assert on")
    expected: Optional[str] = Field(None, description="Expected value for value/count assertions")


class NavigateArgs(BaseModel):
    target: Literal["back", "forward", "home", "refresh"] = Field(description="Navigation action")


class GenerateTestDataArgs(BaseModel):
    data_type: Literal["inn", "kpp", "ogrn", "snils", "phone", "email", "date", "string", "number"] = Field(
        description="Type of test data to generate"
    )
    count: int = Field(1, ge=1, le=1000, description="Number of items to generate")
    format: Optional[str] = Field(None, description="Specific format for the data")


TOOL_SCHEMAS: Dict[str, Type[BaseModel]] = {
    "run_scenario": RunScenarioArgs,
    "create_feature": CreateFeatureArgs,
    "parse_feature": ParseFeatureArgs,
    "generate_steps": GenerateStepsArgs,
    "explore_form": ExploreFormArgs,
    "get_elements": GetElementsArgs,
    "perform_action": PerformActionArgs,
    "get_standard_steps": GetStandardStepsArgs,
    "take_screenshot": TakeScreenshotArgs,
    "wait_for": WaitForArgs,
    "get_table_data": GetTableDataArgs,
    "start_recording": StartRecordingArgs,
    "assert": AssertArgs,
    "navigate": NavigateArgs,
    "generate_test_data": GenerateTestDataArgs,
}

TOOL_DESCRIPTIONS: Dict[str, str] = {
    "run_scenario": "Run BDD scenarios using Vanessa Automation",
    "create_feature": "Create a new feature file with Gherkin scenarios",
    "parse_feature": "Parse and validate a Gherkin feature file",
    "generate_steps": "Generate step definitions for a feature file",
    "explore_form": "Explore and analyze a 1C form structure and available elements",
    "get_elements": "Get UI elements from current 1C form",
    "perform_action": "Perform UI action on 1C form element",
    "get_standard_steps": "Get list of available standard VA steps for UI automation",
    "take_screenshot": "Take screenshot of 1C application window or specific element",
    "wait_for": "Wait for specific condition in 1C interface",
    "get_table_data": "Extract data from 1C table/list",
    "start_recording": "Start recording user actions to generate test scenario",
    "assert": "Assert condition on 1C form element",
    "navigate": "Navigate in 1C application (back, forward, home, refresh)",
    "generate_test_data": "Generate test data for 1C (INN, KPP, OGRN, SNILS, etc.)",
}
