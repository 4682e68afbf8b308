"""
Name-values pairs used to parameterize metadata constraints.
"""

from typing import List, Tuple

from ..utils.errors import ValidationError
from ..utils.messages import format_message


class NameValuesPair:
    """
    Immutable pair of a metadata name and one or more values.

    Values may be passed individually or as a single list or tuple:

        NameValuesPair('status', 'draft', 'review')
        NameValuesPair('status', ['draft', 'review'])
    """

    __slots__ = ('_name', '_values')

    def __init__(self, name: str, *values):
        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            values = tuple(values[0])

        for index, value in enumerate(values):
            if value is None:
                raise ValidationError(format_message('pair.value.none', index=index, name=name))

        object.__setattr__(self, '_name', name)
        object.__setattr__(self, '_values', tuple(values))

    @property
    def name(self) -> str:
        return self._name

    @property
    def values(self) -> Tuple[str, ...]:
        return self._values

    def __setattr__(self, key, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, key):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other) -> bool:
        if not isinstance(other, NameValuesPair):
            return NotImplemented
        return self._name == other._name and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._name, self._values))

    def __str__(self) -> str:
        return f"{self._name}:{','.join(self._values)}"

    def __repr__(self) -> str:
        return f"NameValuesPair(name='{self._name}', values={list(self._values)})"


def starter_list(name: str, *values) -> List[NameValuesPair]:
    """
    Create a list holding a single name-values pair, which more may be added to.

    Args:
        name: Metadata name
        *values: Metadata values

    Returns:
        A list of one NameValuesPair
    """
    return [NameValuesPair(name, *values)]
