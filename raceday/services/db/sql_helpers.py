"""
Query compilation for the catalog services.

Builds parameterized ``WHERE`` and ``ORDER BY`` fragments from client input.
User supplied values only ever travel as positional ``?`` arguments; the only
text spliced into a query is a column name taken from a closed, declared set.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ...errors.exceptions import EmptyMembershipSet, InvalidOrderByField
from .fields import FieldSet, resolve_field

IDENT_OPS = {"=", "IN"}

SORT_ORDER_DESC = "desc"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True)
class OrderTerm:
    """A single ``<field> <direction>`` entry of an ORDER BY clause."""

    field: str
    direction: SortDirection = SortDirection.ASC

    def render(self) -> str:
        return f"{self.field} {self.direction.value}"


@dataclass(frozen=True)
class MembershipConstraint:
    """Restricts ``column`` to the identifiers listed on ``attr`` of the filter."""

    attr: str
    column: str


@dataclass(frozen=True)
class FlagConstraint:
    """Requires ``column = true`` when the boolean ``attr`` of the filter is set."""

    attr: str
    column: str


@dataclass(frozen=True)
class EntitySchema:
    """Everything the compiler needs to know about one listable entity."""

    name: str
    field_set: FieldSet
    constraints: tuple[MembershipConstraint | FlagConstraint, ...] = ()
    default_order: tuple[OrderTerm, ...] = (
        OrderTerm("advertised_start_time", SortDirection.DESC),
    )


@dataclass(frozen=True)
class CompiledQuery:
    """A query template and the positional arguments bound to its placeholders."""

    query: str
    args: tuple[Any, ...] = ()


def _validate_identifier(name: str | None) -> None:
    if not isinstance(name, str) or not name:
        raise ValueError("Invalid identifier")
    # conservative check
    if not name[0].isalpha() and name[0] != "_":
        raise ValueError("Invalid identifier")
    for ch in name:
        if not (ch.isalnum() or ch == "_"):
            raise ValueError("Invalid identifier")


def build_where_clause(filters: list[dict[str, Any]] | None) -> tuple[str, list[Any]]:
    """Build a parameterized WHERE clause from structured filters.

    filters: list of dicts with keys: column, op, value
    Returns: (where_clause_sql, params_list). The clause carries its own
    leading space so it can be appended directly to a base query.
    """
    if not filters:
        return "", []

    parts: list[str] = []
    params: list[Any] = []

    for cond in filters:
        column = cond.get("column")
        op = cond.get("op", "=")
        value = cond.get("value")

        _validate_identifier(column)

        if op.upper() not in IDENT_OPS:
            raise ValueError(f"Unsupported operator: {op}")

        if op.upper() == "IN":
            if not isinstance(value, (list, tuple)):
                raise ValueError("IN operator requires a list/tuple value")
            if not value:
                raise EmptyMembershipSet(details={"column": column})
            placeholders = ",".join(["?"] * len(value))
            parts.append(f"{column} IN ({placeholders})")
            params.extend(list(value))
        else:
            parts.append(f"{column} {op} ?")
            params.append(value)

    where_clause = " WHERE " + " AND ".join(parts) if parts else ""
    return where_clause, params


def compile_filter(schema: EntitySchema, criteria: Any | None) -> tuple[str, list[Any]]:
    """Render the WHERE fragment for ``criteria`` using the schema's constraints.

    Constraints are evaluated in declaration order, so the same criteria always
    produce the same fragment. An empty membership list means the constraint is
    not active.
    """
    if criteria is None:
        return "", []

    filters: list[dict[str, Any]] = []
    for constraint in schema.constraints:
        value = getattr(criteria, constraint.attr, None)
        if isinstance(constraint, MembershipConstraint):
            if value:
                filters.append({"column": constraint.column, "op": "IN", "value": list(value)})
        elif value is True:
            filters.append({"column": constraint.column, "op": "=", "value": True})

    return build_where_clause(filters)


def parse_order_by(field_set: FieldSet, order_by: str) -> list[OrderTerm]:
    """Parse a client order by expression such as ``"meeting_id desc, id"``.

    Each comma separated term is a field name optionally followed by ``desc``.
    Ascending is the default and cannot be spelled out.
    """
    terms: list[OrderTerm] = []
    for term in order_by.split(","):
        words = term.strip(" ").split(" ")
        if len(words) == 1:
            direction = SortDirection.ASC
        elif len(words) == 2:
            if words[1].lower() != SORT_ORDER_DESC:
                raise InvalidOrderByField(details={"term": term.strip(" ")})
            direction = SortDirection.DESC
        else:
            raise InvalidOrderByField(details={"term": term.strip(" ")})

        column = resolve_field(field_set, words[0])
        if column is None:
            raise InvalidOrderByField(details={"field": words[0], "entity": field_set.entity})
        terms.append(OrderTerm(column, direction))
    return terms


def render_order_by(terms: list[OrderTerm] | tuple[OrderTerm, ...]) -> str:
    if not terms:
        return ""
    return " ORDER BY " + ", ".join(term.render() for term in terms)


def build_order_by_clause(field_set: FieldSet, order_by: str) -> str:
    """Validate ``order_by`` against ``field_set`` and render the ORDER BY clause.

    Raises:
        InvalidOrderByField: if any term is malformed or names an unknown field
    """
    return render_order_by(parse_order_by(field_set, order_by))


def assemble_query(base_query: str, schema: EntitySchema, criteria: Any | None) -> CompiledQuery:
    """Append the filter and ordering for ``criteria`` to ``base_query``."""
    where_clause, args = compile_filter(schema, criteria)

    order_by = getattr(criteria, "order_by", None) if criteria is not None else None
    if order_by:
        order_clause = build_order_by_clause(schema.field_set, order_by)
    else:
        order_clause = render_order_by(schema.default_order)

    return CompiledQuery(query=base_query + where_clause + order_clause, args=tuple(args))
