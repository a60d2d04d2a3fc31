# model.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Step:
    """A single stage of a saved pipeline: program name + verbatim args."""
    name: str
    args: str = ""


@dataclass
class Recipe:
    """
    A saved command: ordered pipeline steps plus the stdin requirement.

    The recipe name is not stored here; it is the base name of the file
    the recipe lives in.
    """
    steps: List[Step] = field(default_factory=list)

    # Only consulted when the recipe is run
    stdin: bool = False


def step_to_dict(step: Step) -> Dict[str, str]:
    out: Dict[str, str] = {}
    if step.name:
        out["name"] = step.name
    if step.args:
        out["args"] = step.args
    return out


def recipe_to_dict(recipe: Recipe) -> Dict[str, Any]:
    """
    Convert a Recipe to the on-disk JSON document.

    Empty fields are omitted, so a recipe that does not need stdin has no
    "stdin" key at all.
    """
    out: Dict[str, Any] = {}
    if recipe.steps:
        out["cmds"] = [step_to_dict(s) for s in recipe.steps]
    if recipe.stdin:
        out["stdin"] = True
    return out


def _optional_str(data: Dict[str, Any], key: str) -> str:
    value = data.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"step field {key!r} must be a string")
    return value


def recipe_from_dict(data: Any) -> Recipe:
    """
    Build a Recipe from a decoded JSON document.

    Raises:
        ValueError: if the document does not have the recipe shape
    """
    if not isinstance(data, dict):
        raise ValueError("recipe must be a JSON object")

    cmds = data.get("cmds") or []
    if not isinstance(cmds, list):
        raise ValueError("'cmds' must be a list")

    steps: List[Step] = []
    for item in cmds:
        if not isinstance(item, dict):
            raise ValueError("each entry in 'cmds' must be an object")
        name = _optional_str(item, "name")
        if not name:
            raise ValueError("step name cannot be empty")
        steps.append(Step(name=name, args=_optional_str(item, "args")))

    if not steps:
        raise ValueError("recipe has no commands")

    stdin = data.get("stdin")
    if stdin is None:
        stdin = False
    if not isinstance(stdin, bool):
        raise ValueError("'stdin' must be a boolean")

    return Recipe(steps=steps, stdin=stdin)
