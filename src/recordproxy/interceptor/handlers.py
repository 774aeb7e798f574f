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
"""Access handlers — the functions an InterceptedRecord runs on reads and writes."""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from dataclasses import dataclass
from typing import Any

from recordproxy.interceptor.types import FieldAccess

GetHandler = Callable[[MutableMapping[str, Any], str], Any]
SetHandler = Callable[[MutableMapping[str, Any], str, Any], bool]

# Anything shaped like ``logger.info(event, **kwargs)``.
AccessLog = Callable[..., Any]


def passthrough_get(record: MutableMapping[str, Any], field: str) -> Any:
    """Return the stored value untouched."""
    return record[field]


def passthrough_set(record: MutableMapping[str, Any], field: str, value: Any) -> bool:
    """Store the value and accept the write."""
    record[field] = value
    return True


@dataclass(frozen=True)
class Handlers:
    """The pair of handlers bound to a record at wrap time.

    Attributes:
        on_get: Called as ``on_get(record, field)`` for every read. Its return
            value is what the reader observes.
        on_set: Called as ``on_set(record, field, value)`` for every write.
            A falsy return rejects the write.
    """

    on_get: GetHandler = passthrough_get
    on_set: SetHandler = passthrough_set


# ---------------------------------------------------------------------------
# Logging handlers
# ---------------------------------------------------------------------------


def log_get(log: AccessLog, *, forward: bool = False) -> GetHandler:
    """Build a read handler that logs ``The value of <field> is <value>``.

    The handler returns ``None`` so the read itself yields no value. Pass
    ``forward=True`` to hand the stored value back to the reader instead.
    """

    def on_get(record: MutableMapping[str, Any], field: str) -> Any:
        access = FieldAccess.read(record, field)
        log(access.message(), field=field, value=access.value)
        if forward:
            return access.value
        return None

    return on_get


def log_set(log: AccessLog) -> SetHandler:
    """Build a write handler that logs the change, applies it, and accepts it."""

    def on_set(record: MutableMapping[str, Any], field: str, value: Any) -> bool:
        access = FieldAccess.write(record, field, value)
        log(access.message(), field=field, old_value=access.old_value, new_value=value)
        record[field] = value
        return True

    return on_set
