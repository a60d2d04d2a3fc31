from .model import Recipe, Step
from .pipeline import format_pipeline, pack, parse
from .runner import execute
from .store import RecipeStore, resolve_dir

__all__ = ["Recipe", "Step", "parse", "pack", "format_pipeline", "execute", "RecipeStore", "resolve_dir"]
