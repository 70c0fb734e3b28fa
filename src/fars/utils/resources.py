"""Resolution of the bundled FARS resource directory."""

from pathlib import Path
from typing import Optional, Union

# Installed package root; bundled datasets live in its extdata/ folder.
PACKAGE_DIR: Path = Path(__file__).resolve().parent.parent


def resolve_data_dir(data_dir: Optional[Union[str, Path]] = None) -> Path:
    """Return the base directory that dataset paths are resolved against.

    Args:
        data_dir: Explicit base directory.  When ``None`` the installed
            package directory is used, so ``extdata/`` resolves to the
            bundled datasets.

    Returns:
        Base directory as a ``Path``.  Existence is not checked.
    """
    if data_dir is None:
        return PACKAGE_DIR
    return Path(data_dir)
