"""Ordering of derived fields so that each is computed after its inputs."""

from __future__ import annotations

from collections.abc import Container, Iterable, Mapping

from pmmleval.utils import ParsingError


def build_dag(
    derived_inputs: Mapping[str, Iterable[str]], known_fields: Container[str]
) -> list[str]:
    """Return the derived field names in an order in which they can be computed.

    ``derived_inputs`` maps each derived field to the names it reads;
    ``known_fields`` holds the fields supplied by the mining schema. A derived
    field that reads a field that is neither known nor derived, or that reads
    a field already dropped, is dropped. A dependency cycle raises ParsingError.
    """
    inputs_of = {name: list(inputs) for name, inputs in derived_inputs.items()}
    visited: set[str] = set()
    removed: set[str] = set()
    in_progress: set[str] = set()
    order: list[str] = []

    def visit(name: str) -> None:
        if name in visited:
            return
        if name in in_progress:
            raise ParsingError(f"cyclic dependency on derived field {name}")
        in_progress.add(name)
        try:
            for source in inputs_of[name]:
                if source in removed:
                    removed.add(name)
                    visited.add(name)
                    return
                if source in inputs_of:
                    visit(source)
                elif source not in known_fields:
                    removed.add(name)
                    visited.add(name)
                    return
            visited.add(name)
            order.append(name)
        finally:
            in_progress.discard(name)

    for name in inputs_of:
        visit(name)
    return order