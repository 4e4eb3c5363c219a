"""Base class for single-field value objects."""

from typing import Generic, TypeVar

from pydantic import ConfigDict, RootModel

T = TypeVar("T")


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, compared by value.

    Subclasses validate and normalise ``root`` in a field validator, so an
    instance always holds a value the binding store can accept as is.
    ``model_dump()`` returns the bare primitive.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
