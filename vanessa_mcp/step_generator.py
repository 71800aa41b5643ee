"""Step extraction and 1C step definition stubs"""

import logging
import os
import re
from typing import Iterable, List

from .keywords import strip_keyword

logger = logging.getLogger(__name__)

STUB_TEMPLATE = (
    "// Step: {step}\n"
    "Процедура {method_name}()\n"
    "    // TODO: Implement step\n"
    "КонецПроцедуры\n"
)


def extract_steps(text: str) -> List[str]:
    """Distinct step bodies in first-seen order, keywords stripped"""
    steps = {}
    for line in text.splitlines():
        body = strip_keyword(line.strip())
        if body:
            steps.setdefault(body, None)
    return list(steps)


def step_method_name(step: str) -> str:
    """Procedure name derived from a step body"""
    name = re.sub(r"[^\w\s]", "", step)
    name = re.sub(r"\s+", "_", name)
    return name.lower()


def render_stubs(steps: Iterable[str]) -> str:
    """One placeholder procedure per step"""
    return "\n".join(
        STUB_TEMPLATE.format(step=step, method_name=step_method_name(step))
        for step in steps
    )


def save_stubs(definitions: str, path: str) -> str:
    """Write rendered stubs to `path`; OSError propagates to the caller"""
    normalized = os.path.normpath(path)
    with open(normalized, "w", encoding="utf-8") as f:
        f.write(definitions)

    logger.info(f"Step definitions saved to {normalized}")
    return normalized
