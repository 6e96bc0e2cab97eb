"""Collection of generic types and type aliases for cronsight."""

__all__ = ["ExpressionText", "FieldText", "ShapeFunc", "TImplementation", "TStrEnum"]

from collections.abc import Callable
import random
from typing import TypeAlias, TypeVar

from cronsight.py_compatibility import StrEnum

TStrEnum = TypeVar("TStrEnum", bound=StrEnum)
TImplementation = TypeVar("TImplementation")
ExpressionText: TypeAlias = str
FieldText: TypeAlias = str
ShapeFunc: TypeAlias = Callable[[random.Random], ExpressionText]
