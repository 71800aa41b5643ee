"""
Gherkin feature parser

Parsing is permissive on purpose: lines that are not recognised are skipped
and malformed input degrades to an empty or partial document instead of
raising. Callers that need strict validation must run their own check.
"""

import os
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .errors import FeatureNotFoundError
from .keywords import FEATURE_PREFIXES, SCENARIO_PREFIXES, classify_step, match_prefix


@dataclass(frozen=True)
class ScenarioBlock:
    name: str
    steps: Tuple[str, ...] = ()

    def to_dict(self) -> Dict:
        return {"name": self.name, "steps": list(self.steps)}


@dataclass(frozen=True)
class FeatureDocument:
    name: str
    scenarios: Tuple[ScenarioBlock, ...] = ()

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "scenarios": [scenario.to_dict() for scenario in self.scenarios],
        }


@dataclass
class _ScenarioDraft:
    name: str
    steps: List[str] = field(default_factory=list)


@dataclass
class _FeatureDraft:
    name: str
    scenarios: List[_ScenarioDraft] = field(default_factory=list)


def parse_feature(text: str) -> List[FeatureDocument]:
    """Parse feature file text into feature documents. Never raises."""
    features: List[_FeatureDraft] = []
    current_feature: Optional[_FeatureDraft] = None
    current_scenario: Optional[_ScenarioDraft] = None

    for line in text.splitlines():
        trimmed = line.strip()

        name = match_prefix(trimmed, FEATURE_PREFIXES)
        if name is not None:
            current_feature = _FeatureDraft(name)
            current_scenario = None
            features.append(current_feature)
            continue

        name = match_prefix(trimmed, SCENARIO_PREFIXES)
        if name is not None:
            if current_feature is None:
                # Orphan scenario, its steps are dropped with it
                current_scenario = None
            else:
                current_scenario = _ScenarioDraft(name)
                current_feature.scenarios.append(current_scenario)
            continue

        if classify_step(trimmed) is not None and current_scenario is not None:
            current_scenario.steps.append(trimmed)

    return [
        FeatureDocument(
            name=feature.name,
            scenarios=tuple(
                ScenarioBlock(scenario.name, tuple(scenario.steps))
                for scenario in feature.scenarios
            ),
        )
        for feature in features
    ]


def read_feature_text(path: str) -> str:
    """Read a feature file, checking that it exists first"""
    normalized = os.path.normpath(path)
    if not os.path.isfile(normalized):
        raise FeatureNotFoundError(normalized)

    with open(normalized, "r", encoding="utf-8-sig") as f:
        return f.read()


def load_feature(path: str) -> List[FeatureDocument]:
    """Read and parse a feature file"""
    return parse_feature(read_feature_text(path))
