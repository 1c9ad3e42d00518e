"""Typed application preferences loaded from XML."""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, TextIO, Union

from glasscockpit.xmlconfig import XMLNode, XMLParser

__all__ = ["PreferenceError", "PreferenceType", "Preference", "PreferenceManager"]

logger = logging.getLogger(__name__)


class PreferenceError(Exception):
    """Raised for unknown preferences, type mismatches and bad definitions."""


class PreferenceType(Enum):
    INTEGER = "I"
    BOOLEAN = "B"
    DOUBLE = "D"
    STRING = "S"


_TYPE_NAMES = {
    "double": PreferenceType.DOUBLE,
    "string": PreferenceType.STRING,
    "integer": PreferenceType.INTEGER,
    "boolean": PreferenceType.BOOLEAN,
}

_READERS: dict[PreferenceType, Callable[[XMLNode], object]] = {
    PreferenceType.DOUBLE: XMLNode.text_as_float,
    PreferenceType.STRING: lambda node: node.text,
    PreferenceType.INTEGER: XMLNode.text_as_int,
    PreferenceType.BOOLEAN: XMLNode.text_as_bool,
}

_LABELS = {
    PreferenceType.DOUBLE: "double",
    PreferenceType.STRING: "string",
    PreferenceType.BOOLEAN: "bool",
    PreferenceType.INTEGER: "integer",
}


@dataclass
class Preference:
    """One typed preference value."""

    type: PreferenceType
    value: object

    def formatted(self) -> str:
        if self.type is PreferenceType.DOUBLE:
            return f"{self.value:g}"
        if self.type is PreferenceType.BOOLEAN:
            return str(int(bool(self.value)))
        return str(self.value)


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise PreferenceError(message)


class PreferenceManager:
    """Registry of preferences keyed by name.

    Definitions and defaults come from a preferences XML file; values may then
    be overridden from a ``Preferences`` node of a setup file.
    """

    _instance: Optional["PreferenceManager"] = None

    def __init__(self) -> None:
        self._preferences: dict[str, Preference] = {}

    @classmethod
    def instance(cls) -> "PreferenceManager":
        """The application-wide manager."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def __len__(self) -> int:
        return len(self._preferences)

    def __contains__(self, key: object) -> bool:
        return key in self._preferences

    def initialize(self, path: Union[str, os.PathLike]) -> None:
        """Define preferences and their defaults from an XML file."""
        parser = XMLParser()
        parser.read(path)
        root = parser.get_node("/")
        _check(root.is_valid and root.name == "Preferences", "root node must be Preferences")

        for node in root.children():
            _check(node.name == "Preference", f"unexpected node {node.name!r}")
            _check(
                node.has_child("Name") and node.has_child("Type") and node.has_child("DefaultValue"),
                "preference needs Name, Type and DefaultValue",
            )
            type_name = node.child("Type").text
            ptype = _TYPE_NAMES.get(type_name)
            if ptype is None:
                raise PreferenceError(f"unknown preference type {type_name!r}")
            value = _READERS[ptype](node.child("DefaultValue"))
            self._preferences[node.child("Name").text] = Preference(ptype, value)

    def populate(self, node: XMLNode) -> None:
        """Override defined preferences from the children of a Preferences node."""
        _check(node.is_valid and node.name == "Preferences", "node must be Preferences")
        for child in node.children():
            key = child.name
            logger.info("PreferenceManager: setting %s = %s", key, child.text)
            preference = self._lookup(key)
            self._set(key, preference.type, _READERS[preference.type](child))

    def _lookup(self, key: str) -> Preference:
        try:
            return self._preferences[key]
        except KeyError:
            raise PreferenceError(f"no such preference {key!r}") from None

    def _get(self, key: str, ptype: PreferenceType) -> object:
        preference = self._lookup(key)
        _check(preference.type is ptype, f"preference {key!r} is not of type {ptype.name}")
        return preference.value

    def _set(self, key: str, ptype: PreferenceType, value: object) -> None:
        preference = self._lookup(key)
        _check(preference.type is ptype, f"setting preference {key!r} with wrong type")
        preference.value = value

    def set_string(self, key: str, value: str) -> None:
        self._set(key, PreferenceType.STRING, str(value))

    def set_boolean(self, key: str, value: bool) -> None:
        self._set(key, PreferenceType.BOOLEAN, bool(value))

    def set_double(self, key: str, value: float) -> None:
        self._set(key, PreferenceType.DOUBLE, float(value))

    def set_integer(self, key: str, value: int) -> None:
        self._set(key, PreferenceType.INTEGER, int(value))

    def get_string(self, key: str) -> str:
        return self._get(key, PreferenceType.STRING)  # type: ignore[return-value]

    def get_boolean(self, key: str) -> bool:
        return self._get(key, PreferenceType.BOOLEAN)  # type: ignore[return-value]

    def get_double(self, key: str) -> float:
        return self._get(key, PreferenceType.DOUBLE)  # type: ignore[return-value]

    def get_integer(self, key: str) -> int:
        return self._get(key, PreferenceType.INTEGER)  # type: ignore[return-value]

    def display(self, stream: Optional[TextIO] = None) -> None:
        """Write every preference, sorted by name, for debugging."""
        out = stream if stream is not None else sys.stdout
        out.write(f"PreferenceManager: database contains {len(self._preferences)} entries:\n")
        for key in sorted(self._preferences):
            preference = self._preferences[key]
            out.write(f"\t{key} = [{_LABELS[preference.type]}] {preference.formatted()}\n")