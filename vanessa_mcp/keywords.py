"""
Bilingual Gherkin keywords shared by the feature parser and the step generator.
"""

import re
from enum import Enum
from typing import Optional, Tuple


class StepKeyword(Enum):
    GIVEN = ("Given", "Дано")
    WHEN = ("When", "Когда")
    THEN = ("Then", "Тогда")
    AND = ("And", "И")
    BUT = ("But", "Но")

    @property
    def english(self) -> str:
        return self.value[0]

    @property
    def russian(self) -> str:
        return self.value[1]

    @classmethod
    def literals(cls) -> Tuple[str, ...]:
        """All ten step literals, English first"""
        return tuple(kw.english for kw in cls) + tuple(kw.russian for kw in cls)

    @classmethod
    def from_literal(cls, literal: str) -> "StepKeyword":
        for keyword in cls:
            if literal in keyword.value:
                return keyword
        raise ValueError(f"Not a step keyword: {literal}")


FEATURE_PREFIXES = ("Feature:", "Функционал:")
SCENARIO_PREFIXES = (
    "Scenario Outline:",
    "Структура сценария:",
    "Scenario:",
    "Сценарий:",
)

_LITERALS = "|".join(re.escape(literal) for literal in StepKeyword.literals())

# Keyword must be followed by whitespace or end the line
STEP_LINE = re.compile(rf"^({_LITERALS})(?=\s|$)")
# Keyword plus the whitespace after it, stripped off by the step generator
STEP_PREFIX = re.compile(rf"^({_LITERALS})\s+")


def match_prefix(line: str, prefixes: Tuple[str, ...]) -> Optional[str]:
    """Return the remainder of `line` after the first matching prefix"""
    for prefix in prefixes:
        if line.startswith(prefix):
            return line[len(prefix):].strip()
    return None


def classify_step(line: str) -> Optional[StepKeyword]:
    """Step keyword a trimmed line starts with, if any"""
    match = STEP_LINE.match(line)
    if not match:
        return None
    return StepKeyword.from_literal(match.group(1))


def strip_keyword(line: str) -> Optional[str]:
    """Step body without its keyword, or None when the line is not a step"""
    match = STEP_PREFIX.match(line)
    if not match:
        return None
    return line[match.end():].strip()
