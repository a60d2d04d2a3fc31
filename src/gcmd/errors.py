# errors.py
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional


@dataclass
class GcmdError(Exception):
    """
    Structured gcmd error.

    Every failure the user can see is one of these, so the CLI can print a
    single line on stderr and pick an exit status without a traceback.
    """
    message: str
    path: Optional[Path] = None
    exit_code: int = 1

    kind: ClassVar[str] = "Error"

    def __str__(self) -> str:
        return self.message


class UserLookupError(GcmdError):
    kind = "UserLookup"


class RecipeNotFound(GcmdError):
    kind = "NotFound"


class RecipeExists(GcmdError):
    kind = "AlreadyExists"


class StoreIOError(GcmdError):
    kind = "IOFailure"


class CorruptRecipe(GcmdError):
    kind = "ParseFailure"


class ValidationError(GcmdError):
    kind = "Validation"


class StdinRequired(GcmdError):
    kind = "StdinContract"


@dataclass
class SubshellFailure(GcmdError):
    cmd: str = ""

    kind: ClassVar[str] = "SubshellFailure"
