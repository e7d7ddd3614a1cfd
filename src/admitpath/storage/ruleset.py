from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional, Union

import yaml

from admitpath.models.records import Ruleset

BUNDLED_RULES_PATH = Path(__file__).resolve().parents[1] / "config" / "rules.yaml"


class RulesetLoadError(RuntimeError):
    pass


def rules_path(path: Optional[Union[str, Path]] = None) -> Path:
    # explicit path, then ADMITPATH_RULES_PATH, then the bundled sample
    if path:
        return Path(path)
    env = os.getenv("ADMITPATH_RULES_PATH")
    if env:
        return Path(env)
    return BUNDLED_RULES_PATH


def load_ruleset(path: Optional[Union[str, Path]] = None) -> Ruleset:
    p = rules_path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise RulesetLoadError(f"Cannot read ruleset {p}: {e}") from e

    try:
        raw = json.loads(text) if p.suffix.lower() == ".json" else yaml.safe_load(text)
    except (ValueError, yaml.YAMLError) as e:
        raise RulesetLoadError(f"Cannot parse ruleset {p}: {e}") from e

    if not isinstance(raw, dict):
        raise RulesetLoadError(f"Ruleset {p} is not a mapping")

    # No repair of rule content: the document is trusted as written.
    return Ruleset.model_validate(raw)
