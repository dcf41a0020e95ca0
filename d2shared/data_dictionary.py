"""Tab-separated data tables as shipped in the game's excel files."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import NewType, Optional

# A value computed from a source's stats at run time, such as "lvl*2".
CalcString = NewType("CalcString", str)

_INTEGER = re.compile(r"[+-]?[0-9]+")


@dataclass
class DataDictionary:
    """Rows of a table, with column indices looked up by header name.

    Rows that are blank or have the wrong number of columns are kept as ``None``
    so that row indices match the lines of the file.
    """

    field_name_lookup: dict[str, int] = field(default_factory=dict)
    data: list[Optional[list[str]]] = field(default_factory=list)

    @classmethod
    def from_text(cls, text: str) -> DataDictionary:
        header, *lines = text.split("\r\n")
        lookup = {name: index for index, name in enumerate(header.split("\t"))}
        rows: list[Optional[list[str]]] = []
        for line in lines:
            values = line.split("\t")
            if not line.strip() or len(values) != len(lookup):
                rows.append(None)
            else:
                rows.append(values)
        return cls(field_name_lookup=lookup, data=rows)

    def get_string(self, field_name: str, index: int) -> str:
        try:
            column = self.field_name_lookup[field_name]
        except KeyError:
            raise KeyError(f"unknown field {field_name!r}") from None
        row = self.data[index]
        if row is None:
            raise IndexError(f"row {index} holds no data")
        return row[column]

    def get_number(self, field_name: str, index: int) -> int:
        text = self.get_string(field_name, index)
        if not _INTEGER.fullmatch(text):
            raise ValueError(f"{field_name!r} in row {index} is not a number: {text!r}")
        return int(text)