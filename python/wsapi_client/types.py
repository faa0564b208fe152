"""Common types and interfaces used in the library."""

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

HeadersType = MutableMapping[str, str]
ResponseHeaders = Mapping[str, str | list[str]]
QueryParams = Mapping[str, Any] | Sequence[tuple[str, Any]]
Payload = Mapping[str, Any]
