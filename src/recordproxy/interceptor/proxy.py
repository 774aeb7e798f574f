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
"""InterceptedRecord — routes every field read and write through its handlers."""

from __future__ import annotations

import logging
from collections.abc import Iterator, MutableMapping
from typing import Any

from recordproxy.interceptor.handlers import GetHandler, Handlers, SetHandler
from recordproxy.kernel.exceptions import InvalidRecordError, UnknownFieldError, WriteRejectedError

logger = logging.getLogger(__name__)


class InterceptedRecord:
    """A record whose fields can only be reached through access handlers.

    ``get`` and ``set`` are the explicit entry points. Attribute and item
    syntax route through them::

        person = wrap({"name": "Ali", "age": 35}, on_get=..., on_set=...)
        person.age          # -> person.get("age")
        person["age"] = 40  # -> person.set("age", 40)

    Assignment syntax raises :class:`WriteRejectedError` when the write
    handler returns a falsy signal; ``set`` returns that signal as a bool
    and leaves the check to the caller.

    Names starting with ``_`` are never intercepted. Attribute syntax cannot
    reach fields shadowed by the methods below; item syntax always can.
    """

    __slots__ = ("_record", "_handlers")

    def __init__(self, record: MutableMapping[str, Any], handlers: Handlers) -> None:
        object.__setattr__(self, "_record", record)
        object.__setattr__(self, "_handlers", handlers)

    @property
    def fields(self) -> tuple[str, ...]:
        """Names of the record's fields."""
        return tuple(self._record)

    def get(self, field: str) -> Any:
        """Run the read handler for *field* and return whatever it returns."""
        self._require_field(field)
        return self._handlers.on_get(self._record, field)

    def set(self, field: str, value: Any) -> bool:
        """Run the write handler for *field*; ``True`` if the write was accepted."""
        self._require_field(field)
        accepted = bool(self._handlers.on_set(self._record, field, value))
        if not accepted:
            logger.warning("write_rejected field=%s", field)
        return accepted

    def unwrap(self) -> MutableMapping[str, Any]:
        """Return the underlying record without going through any handler."""
        return self._record

    def _require_field(self, field: str) -> None:
        if field not in self._record:
            raise UnknownFieldError(field, self.fields)

    def _assign(self, field: str, value: Any) -> None:
        if not self.set(field, value):
            raise WriteRejectedError(field, value)

    # -- attribute syntax ---------------------------------------------------

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        if name.startswith("_"):
            object.__setattr__(self, name, value)
            return
        self._assign(name, value)

    # -- item syntax --------------------------------------------------------

    def __getitem__(self, field: str) -> Any:
        return self.get(field)

    def __setitem__(self, field: str, value: Any) -> None:
        self._assign(field, value)

    def __contains__(self, field: object) -> bool:
        return field in self._record

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self._record)

    def __repr__(self) -> str:
        return f"InterceptedRecord(fields={list(self.fields)!r})"


def wrap(
    record: MutableMapping[str, Any],
    on_get: GetHandler | None = None,
    on_set: SetHandler | None = None,
) -> InterceptedRecord:
    """Wrap *record* so its field reads and writes run through the given handlers.

    Omitted handlers fall back to plain pass-through access. The handlers are
    fixed for the lifetime of the returned proxy.
    """
    if record is None or not isinstance(record, MutableMapping):
        raise InvalidRecordError(record)

    defaults = Handlers()
    handlers = Handlers(
        on_get=on_get if on_get is not None else defaults.on_get,
        on_set=on_set if on_set is not None else defaults.on_set,
    )
    return InterceptedRecord(record, handlers)
