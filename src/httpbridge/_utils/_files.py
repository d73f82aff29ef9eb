from pathlib import Path
from typing import Optional
from urllib.parse import unquote, urlsplit

from .._config import Config


def _directory_for(name: str, settings: Config) -> Optional[Path]:
    directories = {
        "DOCUMENTS": settings.documents_dir,
        "DATA": settings.data_dir,
        "LIBRARY": settings.data_dir,
        "CACHE": settings.cache_dir,
        "EXTERNAL": settings.external_dir,
        "EXTERNAL_STORAGE": settings.external_dir,
    }
    return directories.get(name.upper())


def resolve_file(
    path: str, directory: Optional[str] = None, *, settings: Optional[Config] = None
) -> Path:
    """Resolve a download destination or upload source to a filesystem path.

    Args:
        path: File path, relative to ``directory`` when one is given.
        directory: A well-known directory name (``DOCUMENTS``, ``DATA``,
            ``LIBRARY``, ``CACHE``, ``EXTERNAL``, ``EXTERNAL_STORAGE``) or a
            literal base directory. When omitted, ``path`` must be absolute or
            a ``file://`` URI.

    Returns:
        Path: The resolved path. Nothing is opened or created; a missing file
        surfaces as ``FileNotFoundError`` once the caller opens it.
    """
    if directory is None:
        if path.startswith("file:"):
            return Path(unquote(urlsplit(path).path))
        return Path(path)

    settings = settings or Config()
    base = _directory_for(directory, settings)
    if base is None:
        base = Path(directory).expanduser()
    return base / path
