"""GetPost Query."""

from dataclasses import dataclass

from snapix.application.shared import Query


@dataclass(frozen=True)
class GetPostQuery(Query):
    post_id: int
