import asyncio
import logging
import os
import shlex
import tempfile
from typing import Dict, List, Optional

from .config import ServerConfig
from .errors import EngineNotConfiguredError, FeatureNotFoundError
from .scenario_builder import ScenarioDraft

logger = logging.getLogger(__name__)


class VanessaRunner:
    """Runs feature files through the Vanessa Automation executable"""

    def __init__(self, config: ServerConfig):
        self.config = config

    def build_command(
        self,
        feature_path: str,
        settings_path: Optional[str] = None,
        additional_params: Optional[str] = None,
    ) -> List[str]:
        if not self.config.engine_path:
            raise EngineNotConfiguredError()

        command = [self.config.engine_path, "--run-scenarios", feature_path]
        if settings_path:
            command += ["--settings", os.path.normpath(settings_path)]
        if additional_params:
            command += shlex.split(additional_params)
        return command

    async def run_feature(
        self,
        feature_path: str,
        settings_path: Optional[str] = None,
        additional_params: Optional[str] = None,
    ) -> Dict:
        """Run a feature file and capture the engine output verbatim"""
        if not self.config.engine_path:
            raise EngineNotConfiguredError()

        normalized = os.path.normpath(feature_path)
        if not os.path.isfile(normalized):
            raise FeatureNotFoundError(normalized)

        command = self.build_command(normalized, settings_path, additional_params)
        logger.info(f"Running: {' '.join(command)}")

        process = await asyncio.create_subprocess_exec(
            *command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
        try:
            stdout, stderr = await process.communicate()
        except asyncio.CancelledError:
            try:
                process.kill()
            except ProcessLookupError:
                pass
            raise

        logger.info(f"Vanessa Automation exited with code {process.returncode}")

        return {
            "feature_path": normalized,
            "success": process.returncode == 0,
            "returncode": process.returncode,
            "stdout": self._decode(stdout),
            "stderr": self._decode(stderr),
        }

    async def run_draft(self, draft: ScenarioDraft, prefix: str) -> Dict:
        """Write a synthesized scenario to a temporary file and run it"""
        if not self.config.engine_path:
            raise EngineNotConfiguredError()

        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            prefix=f"{prefix}_",
            suffix=".feature",
            dir=self.config.temp_dir,
            delete=False,
        ) as f:
            f.write(draft.render())
            temp_path = f.name

        try:
            result = await self.run_feature(temp_path)
        finally:
            try:
                os.unlink(temp_path)
            except FileNotFoundError:
                pass

        result["scenario"] = draft.render()
        return result

    def _decode(self, data: Optional[bytes]) -> str:
        if not data:
            return ""
        return data.decode(self.config.output_encoding, errors="replace")
