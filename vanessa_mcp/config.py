import os
import tempfile
from dataclasses import dataclass
from typing import Mapping, Optional


@dataclass
class ServerConfig:
    """Settings passed explicitly to the runner and server"""

    engine_path: str = ""
    temp_dir: str = tempfile.gettempdir()
    output_encoding: str = "utf-8"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ServerConfig":
        """Build configuration from environment variables"""
        env = os.environ if environ is None else environ
        return cls(
            engine_path=env.get("VANESSA_AUTOMATION_PATH", ""),
            temp_dir=env.get("TEMP") or tempfile.gettempdir(),
            output_encoding=env.get("VANESSA_OUTPUT_ENCODING", "utf-8"),
            log_level=env.get("VANESSA_MCP_LOG_LEVEL", "INFO").upper(),
        )
