"""Row container whose field lookups may ignore case."""

from __future__ import annotations

from typing import Any, Dict, Iterator, MutableMapping, Optional, Sequence

from dbutil.config.global_config import global_db_config


class Entity(MutableMapping[str, Any]):
    """A result row keyed by column name.

    With ``case_insensitive`` on, ``row["NAME"]`` and ``row["name"]`` reach
    the same field and iteration yields the names as first stored.
    """

    def __init__(
        self,
        values: Optional[MutableMapping[str, Any]] = None,
        *,
        table_name: Optional[str] = None,
        case_insensitive: Optional[bool] = None,
    ) -> None:
        self.table_name = table_name
        self.case_insensitive = (
            global_db_config.current.case_insensitive if case_insensitive is None else case_insensitive
        )
        self._data: Dict[str, Any] = {}
        self._names: Dict[str, str] = {}
        if values:
            self.update(values)

    @classmethod
    def from_cursor(
        cls,
        description: Sequence[Sequence[Any]],
        row: Sequence[Any],
        *,
        case_insensitive: Optional[bool] = None,
    ) -> "Entity":
        """Build an entity from a DB-API ``cursor.description`` and one fetched row."""

        entity = cls(case_insensitive=case_insensitive)
        for column, value in zip(description, row):
            entity[column[0]] = value
        return entity

    def _key(self, name: str) -> str:
        return name.lower() if self.case_insensitive else name

    def __getitem__(self, name: str) -> Any:
        return self._data[self._key(name)]

    def __setitem__(self, name: str, value: Any) -> None:
        key = self._key(name)
        self._names.setdefault(key, name)
        self._data[key] = value

    def __delitem__(self, name: str) -> None:
        key = self._key(name)
        del self._data[key]
        del self._names[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._key(name) in self._data

    def __repr__(self) -> str:
        fields = {name: self._data[key] for key, name in self._names.items()}
        return f"Entity(table_name={self.table_name!r}, {fields!r})"


__all__ = ["Entity"]
