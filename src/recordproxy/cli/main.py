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
"""recordproxy CLI — runs the intercepted-record demo."""

from __future__ import annotations

from pathlib import Path

import click

from recordproxy.cli.console import print_reads, print_record
from recordproxy.core.config import Config
from recordproxy.demo import DemoProperties, run_demo
from recordproxy.logging.structlog_adapter import FORMATS, StructlogAdapter


@click.command()
@click.version_option(package_name="recordproxy")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML or TOML file overlaid on the packaged defaults.",
)
@click.option("--log-format", type=click.Choice(FORMATS), default=None, help="Override recordproxy.logging.format.")
@click.option("--log-level", default=None, help="Override the root log level.")
@click.option(
    "--forward-reads/--no-forward-reads",
    default=None,
    help="Have reads return the stored value instead of nothing.",
)
@click.option("--show-record/--no-show-record", default=True, help="Print the read results and final record as tables.")
def cli(
    config_path: Path | None,
    log_format: str | None,
    log_level: str | None,
    forward_reads: bool | None,
    show_record: bool,
) -> None:
    """Wrap {name: Ali, age: 35}, read name and age, set age to 40, read age."""
    config = Config.from_file(config_path)
    overrides: dict = {}
    if log_format is not None:
        overrides.setdefault("logging", {})["format"] = log_format
    if log_level is not None:
        overrides.setdefault("logging", {})["level"] = {"root": log_level}
    if forward_reads is not None:
        overrides["demo"] = {"forward_reads": forward_reads}
    if overrides:
        config = config.with_overrides({"recordproxy": overrides})

    adapter = StructlogAdapter()
    try:
        adapter.configure(config)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    demo = config.bind(DemoProperties)

    logger = adapter.get_logger("recordproxy.demo")
    run = run_demo(logger.info, forward_reads=demo.forward_reads)

    if show_record:
        print_reads(run.reads)
        print_record(run.record, title="Final record")
