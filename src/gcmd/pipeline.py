# pipeline.py
from __future__ import annotations

from typing import Iterable, List, Union

from .errors import ValidationError
from .model import Recipe, Step

# Stages are split on this literal only. A "|" without surrounding spaces
# stays part of the argument string.
SEPARATOR = " | "


def split_pipeline(text: str) -> List[str]:
    """Split a pipeline string into trimmed stage fragments."""
    return [fragment.strip() for fragment in text.split(SEPARATOR)]


def pack_step(fragment: str) -> Step:
    """
    Turn one trimmed fragment into a Step.

    The first whitespace run separates the program name from its arguments;
    everything after it is kept verbatim.
    """
    parts = fragment.split(None, 1)
    if not parts:
        raise ValidationError("Pipeline stage cannot be empty")
    if len(parts) == 1:
        return Step(name=parts[0])
    return Step(name=parts[0], args=parts[1])


def parse(text: str) -> List[Step]:
    """
    Parse a user-typed pipeline like ``grep foo | wc -l`` into Steps.

    Raises:
        ValidationError: if the pipeline (or any stage of it) is empty
    """
    fragments = split_pipeline(text or "")
    if len(fragments) == 1 and fragments[0] == "":
        raise ValidationError("Command cannot be empty")
    return [pack_step(f) for f in fragments]


def pack(text: str, *, stdin: bool = False) -> Recipe:
    return Recipe(steps=parse(text), stdin=stdin)


def format_pipeline(recipe: Union[Recipe, Iterable[Step]]) -> str:
    """
    Render steps back into the string handed to the shell.

    Each step contributes ``name + " " + args``, so a step without
    arguments keeps a trailing space (``"ls "``). Saved recipes printed by
    older versions of the tool look exactly the same.
    """
    steps = recipe.steps if isinstance(recipe, Recipe) else recipe
    return SEPARATOR.join(f"{s.name} {s.args}" for s in steps)
