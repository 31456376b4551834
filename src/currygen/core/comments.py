"""Canned reaction comments keyed by the rice percentage."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from currygen.core.interfaces import RandomSource
from currygen.core.seeding import system_random_source
from currygen.core.templates import TemplateError, as_path, load_yaml

BUCKET_COUNT = 11


def bucket_index(rice_percent: int) -> int:
    """
    Map a rice percentage to its reaction bucket.

    round-half-up(rice_percent / 10), clamped to [0, 10]; 55 lands in bucket 6.
    """
    index = (int(rice_percent) + 5) // 10
    return max(0, min(BUCKET_COUNT - 1, index))


def _load_buckets(templates_path: Path | None) -> list[list[str]]:
    data: dict[str, Any] = load_yaml(templates_path, "reactions.yaml")
    raw_buckets = data.get("buckets")
    if not isinstance(raw_buckets, list) or len(raw_buckets) != BUCKET_COUNT:
        raise TemplateError(f"reactions.yaml must define exactly {BUCKET_COUNT} buckets")

    buckets: list[list[str]] = []
    for position, raw in enumerate(raw_buckets):
        comments = raw.get("comments") if isinstance(raw, dict) else raw
        if not isinstance(comments, list):
            raise TemplateError(f"reactions.yaml bucket {position} must list comments")
        cleaned = [str(c) for c in comments if c]
        if not cleaned:
            raise TemplateError(f"reactions.yaml bucket {position} has no comments")
        buckets.append(cleaned)
    return buckets


class ReactionCommentSelector:
    """Pick one comment from the bucket matching the rice percentage."""

    def __init__(
        self,
        random_source: RandomSource | None = None,
        templates_path: str | Path | None = None,
        buckets: list[list[str]] | None = None,
    ) -> None:
        self.random_source = random_source or system_random_source()
        self.buckets = buckets if buckets is not None else _load_buckets(as_path(templates_path))
        if len(self.buckets) != BUCKET_COUNT or not all(self.buckets):
            raise TemplateError(f"Expected {BUCKET_COUNT} non-empty comment buckets")

    def select(self, rice_percent: int) -> str:
        bucket = self.buckets[bucket_index(rice_percent)]
        return bucket[self.random_source.randint(0, len(bucket) - 1)]
