from __future__ import annotations

import json
from pathlib import Path

from pubkit.core.result import Err, Ok
from pubkit.release.manifest import PackageManifest, read_manifest, update_version


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "package.json"
    path.write_text(text, encoding="utf-8")
    return path


def test_read_manifest(tmp_path: Path) -> None:
    _write(tmp_path, '{"name": "@tencent/tds-vue-plugin-table", "version": "1.2.3"}')

    result = read_manifest(tmp_path)

    assert isinstance(result, Ok)
    assert result.value.name == "@tencent/tds-vue-plugin-table"
    assert result.value.version == "1.2.3"
    assert result.value.path == tmp_path / "package.json"


def test_read_manifest_missing_file(tmp_path: Path) -> None:
    result = read_manifest(tmp_path)

    assert isinstance(result, Err)
    assert "not found" in result.error.message


def test_read_manifest_invalid_json(tmp_path: Path) -> None:
    _write(tmp_path, "{name: nope}")

    result = read_manifest(tmp_path)

    assert isinstance(result, Err)
    assert "invalid JSON" in result.error.message


def test_read_manifest_requires_name_and_version(tmp_path: Path) -> None:
    _write(tmp_path, '{"name": "pkg"}')

    result = read_manifest(tmp_path)

    assert isinstance(result, Err)
    assert "name/version" in result.error.message


def test_update_version_changes_only_version(tmp_path: Path) -> None:
    original = {
        "name": "@scope/widget",
        "private": False,
        "version": "1.2.3",
        "description": "Größe 表格",
        "scripts": {"build": "vite build", "changelog": "conventional-changelog -p angular"},
        "files": [],
        "peerDependencies": {"vue": "^3.3.0"},
    }
    path = _write(tmp_path, json.dumps(original, indent=2, ensure_ascii=False) + "\n")

    assert isinstance(update_version(path, "1.2.4"), Ok)

    expected = dict(original, version="1.2.4")
    text = path.read_text(encoding="utf-8")
    assert text == json.dumps(expected, indent=2, ensure_ascii=False) + "\n"
    assert list(json.loads(text)) == list(original)
    assert "Größe 表格" in text


def test_update_version_reformats_with_two_space_indent(tmp_path: Path) -> None:
    path = _write(tmp_path, '{"name":"pkg","version":"0.1.0","keywords":["a","b"]}')

    update_version(path, "0.2.0")

    assert path.read_text(encoding="utf-8") == (
        '{\n  "name": "pkg",\n  "version": "0.2.0",\n  "keywords": [\n    "a",\n    "b"\n  ]\n}\n'
    )


def test_short_name_strips_prefixes_in_order() -> None:
    manifest = PackageManifest(
        path=Path("package.json"), name="@tencent/tds-vue-plugin-table", version="1.0.0"
    )

    assert manifest.short_name(("@tencent/", "tds-vue-plugin-")) == "table"
    assert manifest.short_name(()) == "@tencent/tds-vue-plugin-table"
    assert manifest.short_name(("tds-vue-plugin-",)) == "@tencent/tds-vue-plugin-table"


def test_update_version_writes_numbers_like_json_stringify(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        '{"name": "a", "version": "1.0.0", "w": 1e3, "h": 1.0, "ratio": 0.5, "n": 7}\n',
    )

    assert update_version(path, "1.0.1") == Ok(None)

    text = path.read_text(encoding="utf-8")
    assert '"w": 1000,' in text
    assert '"h": 1,' in text
    assert '"ratio": 0.5,' in text
    assert '"n": 7\n' in text
