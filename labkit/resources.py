"""Locating a resource directory near the working or application directory."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

PathLike = Union[str, os.PathLike]


def _application_dir() -> Path:
    return Path(sys.argv[0] or ".").resolve().parent


def find_resource_dir(
    folder_name: PathLike,
    app_dir: Optional[PathLike] = None,
    cwd: Optional[PathLike] = None,
) -> Optional[Path]:
    """Return the first existing ``folder_name`` directory, or None.

    Looks in the working directory, then the application directory and up
    to three levels above it.
    """
    working = Path(cwd) if cwd is not None else Path.cwd()
    application = Path(app_dir) if app_dir is not None else _application_dir()
    candidates = [working / folder_name, application / folder_name]
    candidates.extend(
        application.joinpath(*[".."] * levels, folder_name) for levels in (1, 2, 3)
    )
    for candidate in candidates:
        if candidate.is_dir():
            return candidate.resolve()
    return None


def search_and_set_resource_dir(
    folder_name: PathLike, app_dir: Optional[PathLike] = None
) -> bool:
    """Make the found resource directory the working directory.

    Returns whether a directory was found; the working directory is left
    alone otherwise.
    """
    found = find_resource_dir(folder_name, app_dir)
    if found is None:
        return False
    os.chdir(found)
    return True