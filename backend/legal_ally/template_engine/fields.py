"""Immutable field-value record handed to every section renderer."""

from __future__ import annotations

import html
from collections.abc import Mapping
from typing import Any, Iterator, Optional


class FieldValues(Mapping):
    """Read-only view over the user's answers.

    Values are coerced to strings. A value that is missing, empty, or only
    whitespace counts as "not provided". ``generated_on`` carries the
    formatted generation date so renderers stay free of clock access.
    """

    __slots__ = ("_data", "_generated_on")

    def __init__(self, data: Optional[Mapping[str, Any]] = None, *, generated_on: str = "") -> None:
        self._data = {
            str(key): "" if value is None else str(value)
            for key, value in (data or {}).items()
        }
        self._generated_on = generated_on

    @property
    def generated_on(self) -> str:
        return self._generated_on

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"FieldValues({self._data!r})"

    def provided(self, key: str) -> Optional[str]:
        """Return the trimmed value for ``key``, or None when not provided."""
        value = self._data.get(key, "").strip()
        return value or None

    def text(self, key: str, fallback: str) -> str:
        """HTML-safe value for ``key``, or ``fallback`` when not provided."""
        value = self.provided(key)
        if value is None:
            return fallback
        return html.escape(value, quote=False)
