# store.py
from __future__ import annotations

import json
from pathlib import Path
from typing import List

from .errors import (
    CorruptRecipe,
    RecipeExists,
    RecipeNotFound,
    StoreIOError,
    UserLookupError,
)
from .model import Recipe, recipe_from_dict, recipe_to_dict

# ---------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------
#   ~/.config/gcmd/        used if it already exists
#   ~/.gcmd/               otherwise (created on first save)
#     <name>.json          one recipe per file, base name = recipe name
# ---------------------------------------------------------------------

PREFERRED_DIR = ".config/gcmd"
FALLBACK_DIR = ".gcmd"
RECIPE_SUFFIX = ".json"
DIR_MODE = 0o700
JSON_INDENT = 3

# Arguments that are not valid UTF-8 arrive from argv surrogate-escaped;
# they are written back as the original bytes.
ENCODING_ERRORS = "surrogateescape"


def home_dir() -> Path:
    """Return the current user's home directory or raise UserLookupError."""
    try:
        return Path.home()
    except (RuntimeError, KeyError) as e:
        raise UserLookupError(f"Could not determine home directory: {e}") from e


def resolve_dir(home: str | Path | None = None) -> Path:
    """
    Pick the recipe directory.

    ``<home>/.config/gcmd`` wins only if it already exists; otherwise
    ``<home>/.gcmd`` is returned whether or not it exists.
    """
    base = Path(home) if home is not None else home_dir()
    preferred = base / PREFERRED_DIR
    if preferred.exists():
        return preferred
    return base / FALLBACK_DIR


class RecipeStore:
    """
    File-based recipe store:
      root/
        <name>.json
    """

    def __init__(self, root: str | Path):
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}{RECIPE_SUFFIX}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).is_file()

    def names(self) -> List[str]:
        if not self.root.exists():
            return []
        try:
            entries = [p.name for p in self.root.iterdir()]
        except OSError as e:
            raise StoreIOError(f"Failed to list commands in {self.root}", path=self.root) from e
        return sorted(
            n[: -len(RECIPE_SUFFIX)]
            for n in entries
            if n.endswith(RECIPE_SUFFIX) and len(n) > len(RECIPE_SUFFIX)
        )

    def load(self, name: str) -> Recipe:
        path = self.path_for(name)
        try:
            with path.open("r", encoding="utf-8", errors=ENCODING_ERRORS) as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise RecipeNotFound("No such command", path=path) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CorruptRecipe(f"Failed to parse command file {path}", path=path) from e
        except OSError as e:
            raise StoreIOError(f"Failed to read command file {path}", path=path) from e

        try:
            return recipe_from_dict(data)
        except ValueError as e:
            raise CorruptRecipe(f"Failed to parse command file {path}", path=path) from e

    def _ensure_root(self) -> None:
        if self.root.is_dir():
            return
        try:
            self.root.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)
        except OSError as e:
            raise StoreIOError(f"Failed to create command directory {self.root}", path=self.root) from e

    def save(self, name: str, recipe: Recipe) -> Path:
        """
        Write a new recipe file. Never overwrites.

        A failed write removes the half-written file so the recipe either
        exists completely or not at all.
        """
        self._ensure_root()
        path = self.path_for(name)
        text = json.dumps(recipe_to_dict(recipe), indent=JSON_INDENT, ensure_ascii=False) + "\n"
        try:
            payload = text.encode("utf-8", errors=ENCODING_ERRORS)
        except UnicodeEncodeError as e:
            raise StoreIOError(f"Failed to write command file {path}", path=path) from e

        try:
            f = path.open("xb")
        except FileExistsError as e:
            raise RecipeExists(f"Failed to create command file {path}", path=path) from e
        except OSError as e:
            raise StoreIOError(f"Failed to create command file {path}", path=path) from e

        try:
            with f:
                f.write(payload)
        except (OSError, ValueError) as e:
            path.unlink(missing_ok=True)
            raise StoreIOError(f"Failed to write command file {path}", path=path) from e

        return path

    def remove(self, name: str) -> Path:
        path = self.path_for(name)
        try:
            path.unlink()
        except FileNotFoundError as e:
            raise RecipeNotFound("No such command", path=path) from e
        except OSError as e:
            raise StoreIOError(f"Failed to remove command file {path}", path=path) from e
        return path
