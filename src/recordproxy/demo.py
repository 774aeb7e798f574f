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
"""The person demo: four intercepted accesses on a two-field record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from recordproxy.core.config import config_properties
from recordproxy.interceptor.handlers import AccessLog, log_get, log_set
from recordproxy.interceptor.proxy import wrap

PERSON: dict[str, Any] = {"name": "Ali", "age": 35}


@config_properties(prefix="recordproxy.demo")
@dataclass
class DemoProperties:
    forward_reads: bool = False


@dataclass
class DemoRun:
    """Outcome of one demo run."""

    record: dict[str, Any]
    reads: list[tuple[str, Any]] = field(default_factory=list)


def run_demo(log: AccessLog, record: dict[str, Any] | None = None, forward_reads: bool = False) -> DemoRun:
    """Read ``name``, read ``age``, write ``age = 40``, read ``age`` again.

    Runs against a copy of *record* (``PERSON`` by default). The result holds
    the record as it stands afterwards and what each read evaluated to.
    """
    person = dict(PERSON if record is None else record)
    proxy = wrap(person, on_get=log_get(log, forward=forward_reads), on_set=log_set(log))
    run = DemoRun(record=person)

    run.reads.append(("name", proxy.name))
    run.reads.append(("age", proxy.age))
    proxy.age = 40
    run.reads.append(("age", proxy.age))

    return run
