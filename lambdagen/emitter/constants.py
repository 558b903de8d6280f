"""
Emitter for the shared constants interface referenced by generated code.

Generated interfaces import it for canonical zero values
(``BasicConstant.INT_ZERO``, ``BasicConstant.BOOLEAN_TRUE``, ...).
"""

from ..config import CONSTANTS_CLASS, GeneratorConfig
from ..types import BOOLEAN, BOXED_NAMES, ELEMENT_TYPES
from .docs import INDENT, javadoc

SEPARATOR = f"{INDENT}//" + "-" * 100


class ConstantsEmitter:
    """Emits ``BasicConstant.java``: zero values, empty arrays and class objects."""

    def __init__(self, config: GeneratorConfig):
        self.config = config

    @property
    def file_name(self) -> str:
        return CONSTANTS_CLASS + ".java"

    def _primitive_block(self, token) -> list[str]:
        prefix = token.constant_prefix
        java = token.runtime_name
        boxed = BOXED_NAMES[token]
        if token is BOOLEAN:
            zero = f"{INDENT}boolean BOOLEAN_FALSE = false, BOOLEAN_TRUE = true;"
        else:
            zero = f"{INDENT}{java} {prefix}_ZERO = {token.zero_literal};"
        return [
            zero,
            f"{INDENT}{java}[] {prefix}_EMPTY_ARRAY = {{}};",
            f"{INDENT}{boxed}[] {prefix}_OBJECT_EMPTY_ARRAY = {{}};",
            f"{INDENT}Class<?> {prefix}_TYPE = {java}.class, {prefix}_ARRAY_TYPE = {java}[].class, "
            f"{prefix}_OBJECT_TYPE = {boxed}.class, {prefix}_OBJECT_ARRAY_TYPE = {boxed}[].class;",
        ]

    @staticmethod
    def _reference_block(prefix: str, java: str) -> list[str]:
        return [
            f"{INDENT}{java}[] {prefix}_EMPTY_ARRAY = {{}};",
            f"{INDENT}Class<?> {prefix}_TYPE = {java}.class, {prefix}_ARRAY_TYPE = {java}[].class;",
        ]

    def generate(self) -> str:
        lines = [f"package {self.config.base_package};", ""]
        doc = [
            "Canonical zero values, empty arrays and class objects for the primitive",
            "types, shared by the generated functional interfaces.",
            "",
        ]
        if self.config.author:
            doc.append(f"@author {self.config.author}")
        lines.extend(javadoc(doc))
        lines.append(f"public interface {CONSTANTS_CLASS} {{")
        lines.append(SEPARATOR)
        blocks = [self._primitive_block(t) for t in ELEMENT_TYPES if t.is_primitive]
        blocks.append(self._reference_block("OBJECT", "Object"))
        blocks.append(self._reference_block("CLASS", "Class"))
        blocks.append(self._reference_block("STRING", "String"))
        for block in blocks:
            lines.extend(block)
            lines.append(SEPARATOR)
        lines.append("}")
        return "\n".join(lines) + "\n"
