#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "laureate"
PACKAGE_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_CONFIG_PATH = PACKAGE_ROOT / "config/default.toml"
DEFAULT_RENDER_TEMPLATE_PATH = PACKAGE_ROOT / "templates/certificate.html.j2"
CONFIG_ENV = "LAUREATE_CONFIG"
XDG_CONFIG_ENV = "XDG_CONFIG_HOME"


@dataclass(frozen=True)
class ConfigPaths:
    user_config_dir: Path
    user_config_path: Path
    user_templates_dir: Path
    user_render_template_path: Path


def _user_config_dir() -> Path:
    xdg_override = os.environ.get(XDG_CONFIG_ENV)
    if xdg_override:
        return Path(xdg_override) / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / ".config" / APP_NAME
    return Path(user_config_dir(APP_NAME, appauthor=False))


def config_paths() -> ConfigPaths:
    config_dir = _user_config_dir()
    return ConfigPaths(
        user_config_dir=config_dir,
        user_config_path=config_dir / DEFAULT_CONFIG_PATH.name,
        user_templates_dir=config_dir / "templates",
        user_render_template_path=config_dir / DEFAULT_RENDER_TEMPLATE_PATH.name,
    )


def init_user_config() -> Path:
    """Seed the user config dir with the packaged config and render template."""
    paths = config_paths()
    try:
        paths.user_config_dir.mkdir(parents=True, exist_ok=True)
        paths.user_templates_dir.mkdir(parents=True, exist_ok=True)
        _copy_if_missing(DEFAULT_CONFIG_PATH, paths.user_config_path)
        _copy_if_missing(DEFAULT_RENDER_TEMPLATE_PATH, paths.user_render_template_path)
    except OSError as exc:
        raise OSError(f"unable to create config dir at {paths.user_config_dir}: {exc}") from exc
    return paths.user_config_dir


def user_config_needs_init() -> bool:
    return not config_paths().user_config_path.exists()


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Explicit path, then ``$LAUREATE_CONFIG``, then the user copy, then the packaged default."""
    if path:
        return Path(path)
    env_path = os.environ.get(CONFIG_ENV)
    if env_path and env_path.strip():
        return Path(env_path.strip())
    user_config = config_paths().user_config_path
    if user_config.exists():
        return user_config
    return DEFAULT_CONFIG_PATH


def _copy_if_missing(source: Path, dest: Path) -> None:
    if dest.exists():
        return
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(source, dest)


__all__ = [
    "APP_NAME",
    "CONFIG_ENV",
    "ConfigPaths",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_RENDER_TEMPLATE_PATH",
    "config_paths",
    "init_user_config",
    "resolve_config_path",
    "user_config_needs_init",
]
