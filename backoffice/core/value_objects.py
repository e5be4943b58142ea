"""
Small immutable values shared by commands and queries.
"""

from backoffice.core.exceptions import ProductConstraintError


class ProductId:
    """Identifier of an existing product, always a positive integer"""

    __slots__ = ("_value",)

    def __init__(self, value: int):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ProductConstraintError(
                f"Product id must be a positive integer, got {value!r}",
                ProductConstraintError.INVALID_ID,
            )
        self._value = value

    @property
    def value(self) -> int:
        return self._value

    def __eq__(self, other) -> bool:
        if isinstance(other, ProductId):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __int__(self) -> int:
        return self._value

    def __repr__(self) -> str:
        return f"ProductId({self._value})"
