"""package.json access.

Only the ``version`` field is ever changed. Keys keep their order because
``json`` preserves insertion order on both load and dump; the file is
rewritten with 2-space indentation and a trailing newline, the same shape
``JSON.stringify(pkg, null, 2)`` produces.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from pubkit.core.result import Err, Ok, Result
from pubkit.core.structured import as_str_dict, get_str
from pubkit.release.errors import ManifestError

MANIFEST_FILENAME = "package.json"

# JSON.stringify prints integral numbers without a fraction up to 1e21.
_INTEGRAL_LIMIT = 1e21


@dataclass(frozen=True, slots=True)
class PackageManifest:
    path: Path
    name: str
    version: str

    def short_name(self, strip_prefixes: tuple[str, ...]) -> str:
        """Package name with configured scope/family prefixes removed, in order."""
        name = self.name
        for prefix in strip_prefixes:
            if prefix and name.startswith(prefix):
                name = name[len(prefix) :]
        return name


def _parse_number(literal: str) -> float | int:
    value = float(literal)
    if value.is_integer() and abs(value) < _INTEGRAL_LIMIT:
        return int(value)
    return value


def _load(path: Path) -> Result[dict[str, object], ManifestError]:
    try:
        data_obj: object = json.loads(path.read_text(encoding="utf-8"), parse_float=_parse_number)
    except FileNotFoundError:
        return Err(ManifestError(path, f"manifest not found: {path}"))
    except OSError as e:
        return Err(ManifestError(path, f"cannot read manifest: {e}"))
    except json.JSONDecodeError as e:
        return Err(ManifestError(path, f"invalid JSON in {path}: {e}"))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ManifestError(path, f"manifest root must be a JSON object: {path}"))
    return Ok(data)


def read_manifest(package_dir: Path) -> Result[PackageManifest, ManifestError]:
    path = package_dir / MANIFEST_FILENAME
    loaded = _load(path)
    if isinstance(loaded, Err):
        return loaded

    data = loaded.value
    name = get_str(data, "name")
    version = get_str(data, "version")
    if name is None or version is None:
        return Err(ManifestError(path, f"unable to read package name/version from {path}"))
    return Ok(PackageManifest(path=path, name=name, version=version))


def update_version(path: Path, version: str) -> Result[None, ManifestError]:
    """Overwrite the ``version`` field in place, leaving every other key untouched.

    The file is re-read rather than reusing the startup snapshot, so edits made
    while the operator was answering prompts are kept.
    """
    loaded = _load(path)
    if isinstance(loaded, Err):
        return loaded

    data = loaded.value
    data["version"] = version
    text = json.dumps(data, indent=2, ensure_ascii=False) + "\n"
    try:
        path.write_text(text, encoding="utf-8")
    except OSError as e:
        return Err(ManifestError(path, f"cannot write manifest: {e}"))
    return Ok(None)
