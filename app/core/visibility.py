from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Mapping

from app.core.values import stringify

if TYPE_CHECKING:
    from app.schemas.forms import FieldCondition, FormField


def condition_holds(condition: FieldCondition, data: Mapping[str, Any]) -> bool:
    current = data.get(condition.depends_on)
    if current is None:
        return False

    s = stringify(current)
    if condition.operator == "equals":
        return condition.value is not None and s == stringify(condition.value)
    if condition.operator == "in":
        return s in {stringify(v) for v in (condition.values or ())}
    return False


def is_visible(field: FormField, data: Mapping[str, Any]) -> bool:
    """
    A field with no conditions is always shown. Otherwise it is shown when
    any "show" condition holds (OR across conditions).
    """
    if not field.conditions:
        return True
    return any(
        c.action == "show" and condition_holds(c, data)
        for c in field.conditions
    )


def visible_field_names(fields: Iterable[FormField], data: Mapping[str, Any]) -> list[str]:
    return [f.name for f in fields if is_visible(f, data)]


def find_condition_cycle(fields: Iterable[FormField]) -> list[str] | None:
    """
    Returns the first dependency cycle found among field conditions, e.g.
    ["a", "b", "a"], or None when the dependency graph is acyclic.
    """
    graph: dict[str, list[str]] = {}
    for f in fields:
        graph[f.name] = [c.depends_on for c in f.conditions]

    WHITE, GREY, BLACK = 0, 1, 2
    color = {name: WHITE for name in graph}
    path: list[str] = []

    def visit(name: str) -> list[str] | None:
        color[name] = GREY
        path.append(name)
        for dep in graph.get(name, []):
            if dep not in color:
                continue  # unknown references are reported elsewhere
            if color[dep] == GREY:
                return path[path.index(dep):] + [dep]
            if color[dep] == WHITE:
                found = visit(dep)
                if found:
                    return found
        path.pop()
        color[name] = BLACK
        return None

    for name in graph:
        if color[name] == WHITE:
            found = visit(name)
            if found:
                return found
    return None
