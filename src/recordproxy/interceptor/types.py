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
"""Interceptor core types — FieldAccess dataclass."""

from __future__ import annotations

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Literal


@dataclass
class FieldAccess:
    """Describes one intercepted read or write of a record field.

    Attributes:
        record: The underlying mapping being accessed.
        field: Name of the field being read or written.
        kind: ``"get"`` for reads, ``"set"`` for writes.
        value: The stored value for a read, the incoming value for a write.
        old_value: The value before the write (always ``None`` for reads).
    """

    record: MutableMapping[str, Any]
    field: str
    kind: Literal["get", "set"]
    value: Any = None
    old_value: Any = None

    @classmethod
    def read(cls, record: MutableMapping[str, Any], field: str) -> FieldAccess:
        return cls(record=record, field=field, kind="get", value=record[field])

    @classmethod
    def write(cls, record: MutableMapping[str, Any], field: str, value: Any) -> FieldAccess:
        return cls(record=record, field=field, kind="set", value=value, old_value=record[field])

    def message(self) -> str:
        """Render the console line for this access."""
        if self.kind == "get":
            return f"The value of {self.field} is {self.value}"
        return f"changed {self.field} from {self.old_value} to  {self.value}"
