"""Lookups answering with ``FilesViewDTO`` (empty when nothing matches)."""

from dataclasses import dataclass

from snapix.application.shared import Query


@dataclass(frozen=True)
class GetAvatarFileQuery(Query):
    owner_id: str


@dataclass(frozen=True)
class GetImageQuery(Query):
    image_id: str
