"""lambdagen - Java functional interface generator."""

from .types import (
    GenerationError, Kind, TypeToken, ELEMENT_TYPES, lookup_token,
    PREDICATE, BOOLEAN, CHAR, BYTE, SHORT, INT, LONG, FLOAT, DOUBLE, OBJECT,
)
from .signature import OperatorSignature, SignatureSpec, SupplierSignature
from .decoder import NameDecoder, NameDecodeError, decode_class_name
from .emitter import InterfaceEmitter, SupplierEmitter, ConstantsEmitter
from .config import GeneratorConfig
from .driver import generate_all, plan

__version__ = "0.1.0"
__all__ = [
    "GenerationError",
    "TypeToken",
    "Kind",
    "ELEMENT_TYPES",
    "lookup_token",
    "PREDICATE",
    "BOOLEAN",
    "CHAR",
    "BYTE",
    "SHORT",
    "INT",
    "LONG",
    "FLOAT",
    "DOUBLE",
    "OBJECT",
    "SignatureSpec",
    "OperatorSignature",
    "SupplierSignature",
    "NameDecoder",
    "NameDecodeError",
    "decode_class_name",
    "InterfaceEmitter",
    "SupplierEmitter",
    "ConstantsEmitter",
    "GeneratorConfig",
    "generate_all",
    "plan",
]
