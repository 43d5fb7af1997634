"""
Orderable field sets and order by field validation.

Each entity declares the closed set of columns a client may sort on. Tokens
supplied by clients are matched against that set with underscores ignored:
``meeting_id`` and ``meetingid`` both resolve to ``meeting_id``. Matching is
case-sensitive on the client token, so ``Name`` or ``MeetingId`` are rejected.
"""

from dataclasses import dataclass


def _normalize(name: str) -> str:
    return name.replace("_", "")


@dataclass(frozen=True)
class FieldSet:
    """Immutable, ordered set of column names exposed for sorting on an entity."""

    entity: str
    fields: tuple[str, ...]

    def __post_init__(self):
        for name in self.fields:
            if not name.isidentifier() or name != name.lower():
                raise ValueError(f"Invalid field name for {self.entity}: {name!r}")

    def __contains__(self, token: object) -> bool:
        return isinstance(token, str) and resolve_field(self, token) is not None

    def __iter__(self):
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)


def resolve_field(field_set: FieldSet, token: str) -> str | None:
    """Return the canonical column name matching ``token``, or None."""
    candidate = _normalize(token)
    if not candidate:
        return None
    for name in field_set.fields:
        if _normalize(name.lower()) == candidate:
            return name
    return None


def validate_field(field_set: FieldSet, token: str) -> bool:
    """Check that ``token`` names a field in ``field_set``."""
    return resolve_field(field_set, token) is not None
