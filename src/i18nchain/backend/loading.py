"""Locale file loading for backends.

Locale files hold one translation tree per locale at the top level:

    # en.yml
    en:
      greeting: Hello %{name}
      inbox:
        one: One message
        other: "%{count} messages"

Supported formats are picked by extension: .json (json) and .yml / .yaml
(PyYAML, safe loader). Register more in LOADERS.

Python 3.13+. External dependency: PyYAML.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any, TypeAlias

import yaml

from i18nchain.diagnostics import InvalidLocaleDataError, UnknownFileTypeError

__all__ = [
    "LOADERS",
    "FileLoader",
    "expand_load_path",
    "load_file",
]

logger = logging.getLogger(__name__)

FileLoader: TypeAlias = Callable[[Path], object]
"""Decodes one file into Python data."""


def _load_json(path: Path) -> object:
    with path.open(encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path: Path) -> object:
    with path.open(encoding="utf-8") as f:
        return yaml.safe_load(f)


LOADERS: dict[str, FileLoader] = {
    "json": _load_json,
    "yml": _load_yaml,
    "yaml": _load_yaml,
}
"""Loader by lowercase file extension (without the dot)."""


def load_file(filename: str | Path) -> Mapping[str, Any]:
    """Decode one locale file.

    Args:
        filename: Path to a .json, .yml or .yaml file

    Returns:
        Mapping of locale code to translation tree (bodies may be None)

    Raises:
        UnknownFileTypeError: If the extension has no loader
        InvalidLocaleDataError: If the file cannot be decoded or does not
            decode to a mapping
        OSError: If the file cannot be read
    """
    path = Path(filename)
    file_type = path.suffix.lstrip(".").lower()
    loader = LOADERS.get(file_type)
    if loader is None:
        raise UnknownFileTypeError(file_type, str(path))

    try:
        data = loader(path)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        raise InvalidLocaleDataError(str(path), str(e)) from e

    if not isinstance(data, Mapping):
        raise InvalidLocaleDataError(str(path), "expects it to return a mapping, but does not")
    for locale, body in data.items():
        # A null body is an empty locale
        if body is not None and not isinstance(body, Mapping):
            reason = f"locale {locale!r} holds {type(body).__name__}, expected a mapping"
            raise InvalidLocaleDataError(str(path), reason)

    logger.info("Loaded translations from %s (%d locales)", path, len(data))
    return data


def expand_load_path(load_path: Iterable[str | Path]) -> list[Path]:
    """Expand load path entries into the files to load, in order.

    A directory entry contributes its files with a known extension, sorted
    by name (not recursive). File entries are kept as given, so that an
    unknown extension still fails loudly in load_file().

    Example:
        >>> expand_load_path(["locales/", "extra/de.json"])
        [PosixPath('locales/de.yml'), PosixPath('locales/en.yml'), PosixPath('extra/de.json')]
    """
    files: list[Path] = []
    for entry in load_path:
        path = Path(entry)
        if path.is_dir():
            files.extend(
                sorted(
                    child
                    for child in path.iterdir()
                    if child.is_file() and child.suffix.lstrip(".").lower() in LOADERS
                )
            )
        else:
            files.append(path)
    return files
