"""Metadata of an object written to binary storage."""

from dataclasses import dataclass


@dataclass(frozen=True)
class StoredObject:
    key: str
    url: str
    size: int
