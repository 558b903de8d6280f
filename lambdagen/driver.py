"""
Enumerates every signature combination and writes the generated sources.
"""

from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Union

from .config import GeneratorConfig
from .emitter import ConstantsEmitter, emitter_for
from .naming import MAX_ARITY
from .signature import OperatorSignature, SignatureSpec, SupplierSignature
from .types import (
    ELEMENT_TYPES, GenerationError, Kind, TypeToken,
    BOOLEAN, CHAR, BYTE, SHORT, INT, LONG, FLOAT, DOUBLE, OBJECT, PREDICATE,
)

Signature = Union[SignatureSpec, OperatorSignature, SupplierSignature]

# Return types of the Function family (boolean returns are Predicates)
FUNCTION_RETURNS = (OBJECT, CHAR, BYTE, SHORT, INT, LONG, FLOAT, DOUBLE)
GENERICS = (OBJECT,)
PRIMITIVES = (BOOLEAN, INT, LONG, DOUBLE)

# Candidate types per parameter position, one policy per row
COMBINATION_POLICIES = (
    (GENERICS, GENERICS, GENERICS, GENERICS),
    (PRIMITIVES, PRIMITIVES, PRIMITIVES, PRIMITIVES),
    (GENERICS, PRIMITIVES, PRIMITIVES, PRIMITIVES),
    (GENERICS, GENERICS, PRIMITIVES, PRIMITIVES),
    (GENERICS, GENERICS, GENERICS, PRIMITIVES),
)

OPERATOR_ELEMENTS = ELEMENT_TYPES
SUPPLIER_ELEMENTS = ELEMENT_TYPES


def _prefixes(policy: Sequence[Sequence[TypeToken]]) -> Iterator[tuple[TypeToken, ...]]:
    """Every parameter tuple of length 1..4 whose i-th type comes from policy[i]."""
    def extend(prefix: tuple[TypeToken, ...]) -> Iterator[tuple[TypeToken, ...]]:
        if len(prefix) == len(policy):
            return
        for token in policy[len(prefix)]:
            params = prefix + (token,)
            yield params
            yield from extend(params)
    yield from extend(())


def parameter_combinations(policies=COMBINATION_POLICIES) -> Iterator[tuple[TypeToken, ...]]:
    for policy in policies:
        yield from _prefixes(policy)


def enumerate_signatures() -> Iterator[Signature]:
    """All signatures in generation order, possibly with repeats across policies."""
    for params in parameter_combinations():
        for return_token in FUNCTION_RETURNS:
            yield SignatureSpec(return_token, params)
    for params in parameter_combinations():
        yield SignatureSpec(None, params)
    for params in parameter_combinations():
        yield SignatureSpec(PREDICATE, params)
    for element in OPERATOR_ELEMENTS:
        for arity in range(1, MAX_ARITY + 1):
            yield OperatorSignature.of(element, arity)
    for element in SUPPLIER_ELEMENTS:
        yield SupplierSignature(element)


def plan(signatures: Optional[Iterable[Signature]] = None) -> list[Signature]:
    """Deduplicate signatures and check that every class name is unique.

    Raises GenerationError if two different signatures encode to the same
    class name, since one file would silently overwrite the other.
    """
    if signatures is None:
        signatures = enumerate_signatures()
    planned: list[Signature] = []
    seen: set = set()
    owners: dict[str, Signature] = {}
    for signature in signatures:
        if signature in seen:
            continue
        seen.add(signature)
        for throwing in (False, True):
            name = signature.class_name(throwing)
            owner = owners.get(name)
            if owner is not None:
                raise GenerationError(
                    f"Class name collision: {name} produced by {owner!r} and {signature!r}")
            owners[name] = signature
        planned.append(signature)
    return planned


@dataclass
class GenerationReport:
    """Files written by one generation run."""
    written: list[Path] = field(default_factory=list)
    signatures: int = 0
    by_kind: Counter = field(default_factory=Counter)

    @property
    def file_count(self) -> int:
        return len(self.written)


def write_source(path: Path, text: str, encoding: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding=encoding, newline="\n") as f:
        f.write(text)
    return path


def write_signature(signature: Signature, config: GeneratorConfig) -> list[Path]:
    """Write the non-throwing and throwing variant of one signature."""
    emitter = emitter_for(signature, config)
    directory = config.kind_directory(signature.kind)
    return [
        write_source(directory / file_name, text, config.encoding)
        for file_name, text in emitter.generate_pair().items()
    ]


def write_constants(config: GeneratorConfig) -> Path:
    emitter = ConstantsEmitter(config)
    return write_source(config.package_dir / emitter.file_name, emitter.generate(), config.encoding)


def generate_all(config: Optional[GeneratorConfig] = None, on_write=None) -> GenerationReport:
    """Generate the full interface family under `config.output_root`.

    `on_write` is called with each written path. Any error aborts the run.
    """
    config = config or GeneratorConfig()
    signatures = plan()
    report = GenerationReport(signatures=len(signatures))

    def record(path: Path):
        report.written.append(path)
        if on_write is not None:
            on_write(path)

    record(write_constants(config))
    for signature in signatures:
        for path in write_signature(signature, config):
            record(path)
        report.by_kind[signature.kind] += 1
    return report


def signatures_of_kind(kind: Kind, signatures: Optional[Iterable[Signature]] = None) -> list[Signature]:
    return [s for s in (signatures if signatures is not None else plan()) if s.kind is kind]
