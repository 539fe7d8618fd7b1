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
"""String encoding of structured cache values.

The remote store only holds strings. Strings are written verbatim and every
other value is written as JSON. Reading is best effort: a payload that parses
as JSON is returned parsed, anything else is returned as the raw string. A
string that happens to be valid JSON (``'42'``, ``'{"x":1}'``, ``'null'``)
therefore reads back as the parsed value; there is no type tag to tell the
two apart.
"""

from __future__ import annotations

import json

from flycache.cache.types import StructuredValue
from flycache.kernel.exceptions import ValidationException


def encode_value(value: StructuredValue) -> str:
    """Encode *value* for storage: strings verbatim, everything else as JSON.

    Raises:
        ValidationException: If *value* has no JSON representation
            (arbitrary objects, non-string mapping keys, NaN or infinity,
            nesting deeper than the interpreter recursion limit).
    """
    if isinstance(value, str):
        return value
    try:
        return json.dumps(value, separators=(",", ":"), allow_nan=False)
    except (TypeError, ValueError, RecursionError) as exc:
        raise ValidationException(
            f"Cannot encode value of type {type(value).__name__} for the cache: {exc}",
            code="CACHE_ENCODE",
            context={"type": type(value).__name__},
        ) from exc


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-standard JSON constant {name!r}")


def decode_value(raw: str) -> StructuredValue:
    """Decode a stored payload, falling back to the raw string.

    Payloads nested too deeply for the JSON parser fall back as well.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return raw
