"""
Signature encoding: class names, generic clauses and parameter lists.

Every signature computes its two throw-mode projections (class name and the
three generic clauses) once, when it is constructed. Signatures are frozen,
so the projections never go stale.
"""

from dataclasses import dataclass, field
from typing import Optional

from .naming import (
    RETURN_PREFIX, THROW_SUFFIX,
    arity_prefix, param_fragment,
)
from .types import (
    GenerationError, Kind, TypeToken,
    PREDICATE, is_boolean_return,
)

EXCEPTION_PARAM = "E"
EXCEPTION_BOUND = "E extends Exception"
WILDCARD = "?"


@dataclass(frozen=True)
class Projection:
    """Class name and generic clauses for one throw mode."""
    class_name: str
    generic_declaration: str
    generic_definition: str
    generic_wildcard: str


def _angle(items: list[str]) -> str:
    return "<" + ", ".join(items) + ">" if items else ""


def generic_clauses(letters: list[str], throwing: bool) -> tuple[str, str, str]:
    """Build (declaration, definition, wildcard) clauses from type-parameter letters.

    The exception parameter is appended in throw mode. All three clauses are
    empty when there is nothing to declare.
    """
    declaration = list(letters)
    definition = list(letters)
    if throwing:
        declaration.append(EXCEPTION_BOUND)
        definition.append(EXCEPTION_PARAM)
    wildcard = [WILDCARD] * len(definition)
    return _angle(declaration), _angle(definition), _angle(wildcard)


@dataclass(frozen=True)
class SignatureSpec:
    """A Function, Consumer or Predicate signature.

    `return_token` is None for consumers and BOOLEAN/PREDICATE for
    predicates. `None` entries in `param_tokens` are dropped, so drivers can
    pass fixed-width tuples.
    """
    return_token: Optional[TypeToken]
    param_tokens: tuple[TypeToken, ...]
    _projections: dict[bool, Projection] = field(
        init=False, repr=False, compare=False, default_factory=dict)

    def __post_init__(self):
        params = tuple(p for p in self.param_tokens if p is not None)
        object.__setattr__(self, "param_tokens", params)
        arity_prefix(len(params))
        for token in params:
            if token is PREDICATE:
                raise GenerationError("PREDICATE cannot be used as a parameter type")
        object.__setattr__(self, "_projections", {
            throwing: self._project(throwing) for throwing in (False, True)
        })

    @classmethod
    def of(cls, return_token: Optional[TypeToken], *param_tokens: Optional[TypeToken]) -> "SignatureSpec":
        return cls(return_token, tuple(param_tokens))

    # ---- derived attributes ----

    @property
    def arity(self) -> int:
        return len(self.param_tokens)

    @property
    def kind(self) -> Kind:
        if self.return_token is None:
            return Kind.CONSUMER
        if is_boolean_return(self.return_token):
            return Kind.PREDICATE
        return Kind.FUNCTION

    @property
    def method_name(self) -> str:
        kind = self.kind
        if kind is Kind.CONSUMER:
            return "accept"
        if kind is Kind.PREDICATE:
            return "test"
        return "apply"

    @property
    def generic_count(self) -> int:
        return sum(1 for token in self.param_tokens if token.is_generic)

    @property
    def return_type(self) -> str:
        """Java return type of the abstract method."""
        return self.return_token.return_type if self.return_token is not None else "void"

    @property
    def returns_boolean(self) -> bool:
        return is_boolean_return(self.return_token)

    @property
    def has_generic_return(self) -> bool:
        return self.return_token is not None and self.return_token.is_generic

    def has_generic(self, throwing: bool) -> bool:
        return self.generic_count > 0 or self.has_generic_return or throwing

    def type_parameters(self) -> list[str]:
        """Generic letters in declaration order: parameters first, then the return."""
        letters = [token.param_type(i) for i, token in enumerate(self.param_tokens) if token.is_generic]
        if self.has_generic_return:
            letters.append(self.return_token.return_type)
        return letters

    # ---- projections ----

    def _project(self, throwing: bool) -> Projection:
        declaration, definition, wildcard = generic_clauses(self.type_parameters(), throwing)
        return Projection(
            class_name=self._encode_class_name(throwing),
            generic_declaration=declaration,
            generic_definition=definition,
            generic_wildcard=wildcard,
        )

    def _encode_class_name(self, throwing: bool) -> str:
        parts = [
            arity_prefix(self.arity),
            self.kind.marker,
            param_fragment(self.param_tokens),
        ]
        if self.kind is Kind.FUNCTION:
            parts.append(RETURN_PREFIX + self.return_token.capitalized_name)
        if throwing:
            parts.append(THROW_SUFFIX)
        return "".join(parts)

    def projection(self, throwing: bool) -> Projection:
        return self._projections[bool(throwing)]

    def class_name(self, throwing: bool = False) -> str:
        return self.projection(throwing).class_name

    def generic_declaration(self, throwing: bool = False) -> str:
        return self.projection(throwing).generic_declaration

    def generic_definition(self, throwing: bool = False) -> str:
        return self.projection(throwing).generic_definition

    def generic_wildcard(self, throwing: bool = False) -> str:
        return self.projection(throwing).generic_wildcard

    # ---- parameters ----

    def parameters(self) -> list[tuple[str, str]]:
        """(type, name) pairs for the abstract method's parameters."""
        if not self.param_tokens:
            raise GenerationError("Signature has no parameters")
        return [(token.param_type(i), token.param_name(i)) for i, token in enumerate(self.param_tokens)]

    def param_declaration(self) -> str:
        return ", ".join(f"{ptype} {pname}" for ptype, pname in self.parameters())

    def param_invocation(self) -> str:
        return ", ".join(pname for _, pname in self.parameters())


@dataclass(frozen=True)
class OperatorSignature(SignatureSpec):
    """An operator: every parameter and the return share one element type."""

    def __post_init__(self):
        if self.return_token is None:
            raise GenerationError("The type of return type is incorrect")
        super().__post_init__()
        for token in self.param_tokens:
            if token is not self.return_token:
                raise GenerationError(
                    f"Operator parameters must all be {self.return_token!r}, got {token!r}")

    @classmethod
    def of(cls, element: TypeToken, arity: int) -> "OperatorSignature":
        if element is None:
            raise GenerationError("The type of return type is incorrect")
        return cls(element, (element,) * arity)

    @property
    def element(self) -> TypeToken:
        return self.return_token

    @property
    def kind(self) -> Kind:
        return Kind.OPERATOR

    @property
    def method_name(self) -> str:
        return "apply"

    def _encode_class_name(self, throwing: bool) -> str:
        name = self.element.capitalized_name + arity_prefix(self.arity) + Kind.OPERATOR.marker
        return name + THROW_SUFFIX if throwing else name


@dataclass(frozen=True)
class SupplierSignature:
    """A zero-parameter supplier of one element type."""
    element: TypeToken
    _projections: dict[bool, Projection] = field(
        init=False, repr=False, compare=False, default_factory=dict)

    def __post_init__(self):
        if self.element is None or self.element is PREDICATE:
            raise GenerationError(f"Cannot build a supplier of {self.element!r}")
        object.__setattr__(self, "_projections", {
            throwing: self._project(throwing) for throwing in (False, True)
        })

    @property
    def kind(self) -> Kind:
        return Kind.SUPPLIER

    @property
    def arity(self) -> int:
        return 0

    @property
    def return_type(self) -> str:
        return self.element.return_type

    @property
    def returns_boolean(self) -> bool:
        return is_boolean_return(self.element)

    @property
    def method_name(self) -> str:
        if self.element.is_generic:
            return "get"
        return "getAs" + self.element.capitalized_name

    def has_generic(self, throwing: bool) -> bool:
        return self.element.is_generic or throwing

    def type_parameters(self) -> list[str]:
        return [self.element.return_type] if self.element.is_generic else []

    def _project(self, throwing: bool) -> Projection:
        declaration, definition, wildcard = generic_clauses(self.type_parameters(), throwing)
        name = self.element.capitalized_name + Kind.SUPPLIER.marker
        return Projection(
            class_name=name + THROW_SUFFIX if throwing else name,
            generic_declaration=declaration,
            generic_definition=definition,
            generic_wildcard=wildcard,
        )

    def projection(self, throwing: bool) -> Projection:
        return self._projections[bool(throwing)]

    def class_name(self, throwing: bool = False) -> str:
        return self.projection(throwing).class_name

    def generic_declaration(self, throwing: bool = False) -> str:
        return self.projection(throwing).generic_declaration

    def generic_definition(self, throwing: bool = False) -> str:
        return self.projection(throwing).generic_definition

    def generic_wildcard(self, throwing: bool = False) -> str:
        return self.projection(throwing).generic_wildcard
