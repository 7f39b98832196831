"""Typed loading of the optional ``release.toml``.

Every key is optional; a missing file yields the defaults, which match the
pnpm + yarn setup the tool was written for.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "CONFIG_FILENAME",
    "CommandsConfig",
    "Config",
    "ConfigError",
    "ReleaseSettings",
    "load_config",
    "resolve_config",
]

CONFIG_FILENAME = "release.toml"

DEFAULT_PREID = "beta"
DEFAULT_REMOTE = "origin"
DEFAULT_STRIP_PREFIXES: tuple[str, ...] = ("@tencent/", "tds-vue-plugin-")

DEFAULT_BUILD: tuple[str, ...] = ("pnpm", "run", "build")
DEFAULT_CHANGELOG: tuple[str, ...] = ("pnpm", "run", "changelog")
DEFAULT_PUBLISH: tuple[str, ...] = ("yarn", "publish")


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when release.toml cannot be loaded or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class CommandsConfig:
    """External commands, as argv prefixes."""

    build: tuple[str, ...] = DEFAULT_BUILD
    changelog: tuple[str, ...] = DEFAULT_CHANGELOG
    # Publish flags are appended to this prefix.
    publish: tuple[str, ...] = DEFAULT_PUBLISH


@dataclass(frozen=True, slots=True)
class ReleaseSettings:
    preid: str = DEFAULT_PREID
    remote: str = DEFAULT_REMOTE
    strip_prefixes: tuple[str, ...] = DEFAULT_STRIP_PREFIXES


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    release: ReleaseSettings = field(default_factory=ReleaseSettings)
    commands: CommandsConfig = field(default_factory=CommandsConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from parsed TOML.

        Raises:
            ValueError: if a present key has the wrong shape.
        """
        release: StrDict = get_table(data, "release") or {}
        commands: StrDict = get_table(data, "commands") or {}

        def command(key: str, default: tuple[str, ...]) -> tuple[str, ...]:
            if key not in commands:
                return default
            argv = get_str_list(commands, key)
            if not argv:
                raise ValueError(f"commands.{key} must be a non-empty list of strings")
            return tuple(argv)

        prefixes: tuple[str, ...] = DEFAULT_STRIP_PREFIXES
        if "strip_prefixes" in release:
            raw = get_str_list(release, "strip_prefixes")
            if raw is None:
                raise ValueError("release.strip_prefixes must be a list of strings")
            prefixes = tuple(raw)

        return cls(
            release=ReleaseSettings(
                preid=get_str(release, "preid") or DEFAULT_PREID,
                remote=get_str(release, "remote") or DEFAULT_REMOTE,
                strip_prefixes=prefixes,
            ),
            commands=CommandsConfig(
                build=command("build", DEFAULT_BUILD),
                changelog=command("changelog", DEFAULT_CHANGELOG),
                publish=command("publish", DEFAULT_PUBLISH),
            ),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except OSError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file."""
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def resolve_config(package_dir: Path, explicit: Path | None = None) -> Result[Config, ConfigError]:
    """Load ``explicit`` if given, else ``<package_dir>/release.toml`` if present.

    An explicit path that does not exist is an error; a missing default file
    is not.
    """
    if explicit is not None:
        return load_config(explicit)

    candidate = package_dir / CONFIG_FILENAME
    if not candidate.is_file():
        return Ok(Config())
    return load_config(candidate)
