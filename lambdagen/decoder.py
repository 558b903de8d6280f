"""
Decoder for generated class names, using Lark.

Turns a name such as ``QuadrupleConsumerTwObjectBooleanLongThrow`` back into
the kind, return type and parameter types it was encoded from.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Union

from lark import Lark, Transformer, Token
from lark.exceptions import UnexpectedInput

from .naming import ARITY_PREFIXES, COUNT_MARKERS
from .signature import OperatorSignature, SignatureSpec, SupplierSignature
from .types import (
    ELEMENT_TYPES, GenerationError, Kind, PREDICATE, TypeToken,
)

GRAMMAR_FILE = Path(__file__).parent / "names.lark"

ARITY_BY_PREFIX = {prefix: arity for arity, prefix in ARITY_PREFIXES.items()}
COUNT_BY_MARKER = {marker: count for count, marker in COUNT_MARKERS.items() if marker}
TOKEN_BY_CAPITALIZED = {token.capitalized_name: token for token in ELEMENT_TYPES}
KIND_BY_MARKER = {kind.marker: kind for kind in Kind}


class NameDecodeError(GenerationError):
    """A class name that the encoder could not have produced."""
    pass


@dataclass(frozen=True)
class DecodedName:
    """Structure recovered from a class name."""
    name: str
    kind: Kind
    return_token: Optional[TypeToken]
    param_tokens: tuple[TypeToken, ...]
    throwing: bool

    @property
    def arity(self) -> int:
        return len(self.param_tokens)

    def to_signature(self) -> Union[SignatureSpec, OperatorSignature, SupplierSignature]:
        if self.kind is Kind.OPERATOR:
            return OperatorSignature.of(self.return_token, self.arity)
        if self.kind is Kind.SUPPLIER:
            return SupplierSignature(self.return_token)
        return SignatureSpec(self.return_token, self.param_tokens)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "kind": self.kind.name,
            "return": self.return_token.name if self.return_token is not None else None,
            "params": [token.name for token in self.param_tokens],
            "throwing": self.throwing,
        }


class NameTransformer(Transformer):
    """Transforms the Lark parse tree into plain tuples for validation."""

    def start(self, items):
        return items[0]

    def group(self, items):
        count = 1
        for item in items:
            if isinstance(item, Token) and item.type == "COUNT":
                count = COUNT_BY_MARKER[str(item)]
        return (TOKEN_BY_CAPITALIZED[str(items[-1])], count)

    def return_suffix(self, items):
        return ("return", TOKEN_BY_CAPITALIZED[str(items[0])])

    def function_name(self, items):
        arity = None
        kind = None
        groups = []
        return_token = None
        throwing = False
        for item in items:
            if isinstance(item, Token):
                if item.type == "ARITY":
                    arity = ARITY_BY_PREFIX[str(item)]
                elif item.type == "KIND":
                    kind = KIND_BY_MARKER[str(item)]
                elif item.type == "THROW":
                    throwing = True
            elif item[0] == "return":
                return_token = item[1]
            else:
                groups.append(item)
        return ("function", kind, arity, tuple(groups), return_token, throwing)

    def operator_name(self, items):
        element = TOKEN_BY_CAPITALIZED[str(items[0])]
        arity = ARITY_BY_PREFIX[str(items[1])]
        throwing = any(isinstance(i, Token) and i.type == "THROW" for i in items)
        return ("operator", element, arity, throwing)

    def supplier_name(self, items):
        element = TOKEN_BY_CAPITALIZED[str(items[0])]
        throwing = any(isinstance(i, Token) and i.type == "THROW" for i in items)
        return ("supplier", element, throwing)


def _expand_groups(name: str, arity: int, groups: tuple) -> tuple[TypeToken, ...]:
    """Rebuild the parameter list from run-length groups, rejecting non-canonical forms."""
    if len(groups) == 1:
        token, count = groups[0]
        if count != 1:
            raise NameDecodeError(f"{name}: a single type is never written with a count marker")
        return (token,) * arity

    params: list[TypeToken] = []
    previous = None
    for token, count in groups:
        if token is previous:
            raise NameDecodeError(f"{name}: consecutive groups of {token!r} must be merged")
        params.extend([token] * count)
        previous = token
    if len(params) != arity:
        raise NameDecodeError(
            f"{name}: groups describe {len(params)} parameter(s), arity prefix says {arity}")
    return tuple(params)


def _build(name: str, raw: tuple) -> DecodedName:
    if raw[0] == "operator":
        _, element, arity, throwing = raw
        return DecodedName(name, Kind.OPERATOR, element, (element,) * arity, throwing)

    if raw[0] == "supplier":
        _, element, throwing = raw
        return DecodedName(name, Kind.SUPPLIER, element, (), throwing)

    _, kind, arity, groups, return_token, throwing = raw
    params = _expand_groups(name, arity, groups)
    if kind is Kind.FUNCTION:
        if return_token is None:
            raise NameDecodeError(f"{name}: Function names need a 'To<Type>' suffix")
        if return_token.runtime_name == "boolean":
            raise NameDecodeError(f"{name}: boolean-returning signatures are Predicates")
    elif return_token is not None:
        raise NameDecodeError(f"{name}: {kind.marker} names take no return suffix")
    elif kind is Kind.PREDICATE:
        return_token = PREDICATE
    return DecodedName(name, kind, return_token, params, throwing)


class NameDecoder:
    """Parser for generated class names."""

    def __init__(self):
        with open(GRAMMAR_FILE, "r") as f:
            grammar = f.read()

        self._parser = Lark(
            grammar,
            parser="earley",
            maybe_placeholders=False,
        )
        self._transformer = NameTransformer()

    def decode(self, name: str) -> DecodedName:
        """Decode a class name, optionally given as a file name ending in .java."""
        if name.endswith(".java"):
            name = name[:-len(".java")]
        try:
            tree = self._parser.parse(name)
        except UnexpectedInput as e:
            raise NameDecodeError(f"Not a generated class name: {name}") from e
        return _build(name, self._transformer.transform(tree))


@lru_cache(maxsize=None)
def default_decoder() -> NameDecoder:
    return NameDecoder()


def decode_class_name(name: str) -> DecodedName:
    return default_decoder().decode(name)
