import os
from typing import Optional

from domain.constants import IMG_DIR, IMG_EXT, PROJECT_ROOT


def image_source(name: str) -> str:
    """Relative asset path for an image name, e.g. 'pig' -> 'img/pig.png'."""
    return f"{IMG_DIR}/{name}{IMG_EXT}"


def resolve_asset(relative: str, base_dirs=None) -> Optional[str]:
    """Resolve a relative asset path across local dev and container layouts.

    Strategy:
    1. Try project-root relative (based on this package's location).
    2. Try cwd relative (in case the app is launched from elsewhere).
    Returns first existing file path or None.
    """
    if base_dirs is None:
        base_dirs = [PROJECT_ROOT, os.getcwd()]
    for base in base_dirs:
        p = os.path.join(base, *relative.split('/'))
        if os.path.isfile(p):
            return p
    return None
