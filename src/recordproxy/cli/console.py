# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Shared Rich console for CLI output."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

RECORDPROXY_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "error": "bold red",
    "dim": "dim",
})

console = Console(theme=RECORDPROXY_THEME)


def print_record(record: Mapping[str, Any], title: str = "Record") -> None:
    """Print a record's fields and values as a two-column table."""
    table = Table(title=title, border_style="dim")
    table.add_column("Field", style="info")
    table.add_column("Value")
    for field, value in record.items():
        table.add_row(field, repr(value))
    console.print(table)


def print_reads(reads: Sequence[tuple[str, Any]], title: str = "Reads") -> None:
    """Print what each intercepted read evaluated to, in order."""
    table = Table(title=title, border_style="dim")
    table.add_column("Field", style="info")
    table.add_column("Read ->")
    for field, value in reads:
        table.add_row(field, repr(value))
    console.print(table)
