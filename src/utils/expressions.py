"""
Partial-update expression builder for DynamoDB.

A patch is the set of attributes the caller actually supplied. Rendering
aliases every attribute name (``#attr``) and every value (``:attr``), so
reserved words such as ``name`` are safe and no value is ever spliced into
the expression string.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Tuple

_PLACEHOLDER_UNSAFE = re.compile(r"[^A-Za-z0-9_]")


@dataclass(frozen=True)
class UpdateExpression:
    """Keyword arguments for ``Table.update_item``."""

    expression: str
    names: Dict[str, str] = field(default_factory=dict)
    values: Dict[str, Any] = field(default_factory=dict)

    def as_kwargs(self) -> Dict[str, Any]:
        return {
            "UpdateExpression": self.expression,
            "ExpressionAttributeNames": self.names,
            "ExpressionAttributeValues": self.values,
        }


class UpdatePatch:
    """
    Sparse set of attribute assignments.

    Example:
        patch = UpdatePatch([("title", "Dune"), ("rating", Decimal("4.5"))])
        if patch:
            table.update_item(Key=key, ReturnValues="ALL_NEW", **patch.render().as_kwargs())
    """

    def __init__(self, assignments: Iterable[Tuple[str, Any]] = ()) -> None:
        self._assignments: List[Tuple[str, Any]] = []
        for name, value in assignments:
            self.set(name, value)

    def set(self, name: str, value: Any) -> "UpdatePatch":
        if not name:
            raise ValueError("Attribute name must not be empty")
        self._assignments = [(n, v) for n, v in self._assignments if n != name]
        self._assignments.append((name, value))
        return self

    @property
    def attribute_names(self) -> List[str]:
        return [name for name, _ in self._assignments]

    def __len__(self) -> int:
        return len(self._assignments)

    def __bool__(self) -> bool:
        return bool(self._assignments)

    def render(self) -> UpdateExpression:
        """
        Render the patch as a ``SET`` expression.

        Raises:
            ValueError: If the patch is empty (DynamoDB rejects ``SET`` with no actions)
        """
        if not self._assignments:
            raise ValueError("Cannot render an empty update patch")

        clauses: List[str] = []
        names: Dict[str, str] = {}
        values: Dict[str, Any] = {}
        for index, (name, value) in enumerate(self._assignments):
            token = f"{_PLACEHOLDER_UNSAFE.sub('_', name)}{index}"
            names[f"#{token}"] = name
            values[f":{token}"] = value
            clauses.append(f"#{token} = :{token}")

        return UpdateExpression("SET " + ", ".join(clauses), names, values)
