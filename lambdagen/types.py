"""
Type vocabulary for the functional-interface generator.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class GenerationError(Exception):
    """Error in the type catalog, a signature, or the generation run."""
    pass


class Kind(Enum):
    """Family of a generated interface: (sub-package directory, class-name marker)."""
    CONSUMER = ("consumer", "Consumer")
    PREDICATE = ("predicate", "Predicate")
    FUNCTION = ("function", "Function")
    OPERATOR = ("operator", "Operator")
    SUPPLIER = ("supplier", "Supplier")

    @property
    def directory(self) -> str:
        return self.value[0]

    @property
    def marker(self) -> str:
        return self.value[1]


PARAM_NAMES = ("v1", "v2", "v3", "v4")


@dataclass(frozen=True)
class TypeToken:
    """One participant type of a generated signature."""
    name: str
    runtime_name: str
    capitalized_name: str
    zero_literal: Optional[str] = None
    return_generic: Optional[str] = None
    param_generics: tuple[str, ...] = ()
    param_names: tuple[str, ...] = PARAM_NAMES

    def __repr__(self) -> str:
        return self.name

    @property
    def is_generic(self) -> bool:
        return self.return_generic is not None

    @property
    def is_primitive(self) -> bool:
        return not self.is_generic

    @property
    def return_type(self) -> str:
        """Return type as written in Java: the generic letter if any, else the runtime name."""
        return self.return_generic if self.return_generic is not None else self.runtime_name

    @property
    def constant_prefix(self) -> str:
        """Prefix of this type's members in the shared constants interface."""
        return self.name

    def param_type(self, index: int) -> str:
        """Java type of the parameter at `index`.

        The generic token answers with its per-position letter, every other
        token with its runtime name.
        """
        if not self.param_names:
            raise GenerationError(f"{self.name} has no parameter semantics")
        if self.param_generics:
            if index < 0 or index >= len(self.param_generics):
                raise GenerationError(
                    f"Parameter index {index} out of range for {self.name}")
            return self.param_generics[index]
        return self.runtime_name

    def param_name(self, index: int) -> str:
        if not self.param_names:
            raise GenerationError(f"{self.name} has no parameter semantics")
        if index < 0 or index >= len(self.param_names):
            raise GenerationError(f"Parameter index {index} out of range for {self.name}")
        return self.param_names[index]


# Return marker for predicates; never used as a parameter.
PREDICATE = TypeToken("PREDICATE", "boolean", "Boolean", "false", param_names=())
BOOLEAN = TypeToken("BOOLEAN", "boolean", "Boolean", "false")
CHAR = TypeToken("CHAR", "char", "Char", "'\\0'")
BYTE = TypeToken("BYTE", "byte", "Byte", "0")
SHORT = TypeToken("SHORT", "short", "Short", "0")
INT = TypeToken("INT", "int", "Int", "0")
LONG = TypeToken("LONG", "long", "Long", "0L")
FLOAT = TypeToken("FLOAT", "float", "Float", "0.0f")
DOUBLE = TypeToken("DOUBLE", "double", "Double", "0.0d")
OBJECT = TypeToken(
    "OBJECT", "Object", "Object",
    return_generic="R",
    param_generics=("T", "U", "V", "O"),
)

# Concrete element types, in catalog order.
ELEMENT_TYPES = (BOOLEAN, CHAR, BYTE, SHORT, INT, LONG, FLOAT, DOUBLE, OBJECT)

TOKENS = {token.name: token for token in (PREDICATE,) + ELEMENT_TYPES}

# Boxed wrapper class names for the constants interface
BOXED_NAMES = {
    BOOLEAN: "Boolean",
    CHAR: "Character",
    BYTE: "Byte",
    SHORT: "Short",
    INT: "Integer",
    LONG: "Long",
    FLOAT: "Float",
    DOUBLE: "Double",
}


def is_boolean_return(token: Optional[TypeToken]) -> bool:
    """Check if a return token produces a boolean-valued method."""
    return token is PREDICATE or token is BOOLEAN


def lookup_token(name: str) -> TypeToken:
    """Resolve a catalog token by name (case-insensitive)."""
    try:
        return TOKENS[name.upper()]
    except KeyError:
        raise GenerationError(
            f"Unknown type token: {name} (expected one of {', '.join(TOKENS)})") from None
