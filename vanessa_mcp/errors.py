class VanessaMCPError(Exception):
    """Base error for the Vanessa Automation MCP server"""


class FeatureNotFoundError(VanessaMCPError, FileNotFoundError):
    """Referenced feature file does not exist"""

    def __init__(self, path: str):
        super().__init__(f"Feature file not found at {path}")
        self.path = path


class ScenarioValidationError(VanessaMCPError, ValueError):
    """Arguments are not enough to build a valid scenario"""


class UnknownVariantError(VanessaMCPError, ValueError):
    """Value outside of an accepted closed set"""

    def __init__(self, kind: str, value: str, accepted=None):
        message = f"Unknown {kind}: {value}"
        if accepted:
            message += f" (expected one of: {', '.join(accepted)})"
        super().__init__(message)
        self.kind = kind
        self.value = value


class EngineNotConfiguredError(VanessaMCPError):
    """Path to the Vanessa Automation executable is not set"""

    def __init__(self):
        super().__init__(
            "VANESSA_AUTOMATION_PATH environment variable is not set. "
            "Please set it to the path of your Vanessa Automation installation."
        )
