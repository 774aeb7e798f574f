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
"""Field-access interception for plain mapping records."""

from recordproxy.interceptor.handlers import (
    Handlers,
    log_get,
    log_set,
    passthrough_get,
    passthrough_set,
)
from recordproxy.interceptor.proxy import InterceptedRecord, wrap
from recordproxy.interceptor.types import FieldAccess

__all__ = [
    "FieldAccess",
    "Handlers",
    "InterceptedRecord",
    "log_get",
    "log_set",
    "passthrough_get",
    "passthrough_set",
    "wrap",
]
