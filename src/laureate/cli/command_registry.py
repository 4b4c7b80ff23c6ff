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

import typer

from .commands import (
    config as config_command,
    fields as fields_command,
    issue as issue_command,
    new as new_command,
    preview as preview_command,
    templates as templates_command,
    validate as validate_command,
)


def register(app: typer.Typer) -> None:
    new_command.register(app)
    templates_command.register(app)
    fields_command.register(app)
    validate_command.register(app)
    preview_command.register(app)
    issue_command.register(app)
    config_command.register(app)
