"""
Singleton constants and static factories emitted into each interface.
"""

from ..config import CONSTANTS_CLASS
from ..types import Kind
from .docs import INDENT, javadoc

UNCHECKED = f'{INDENT}@SuppressWarnings("unchecked")'


class FactoryMixin:
    """Mixin providing DEFAULT_TRUE/DEFAULT_FALSE, EMPTY, empty() and constant()."""

    # Expected from the emitter
    signature: any
    _param_invocation: callable

    def _static_header(self, throwing: bool) -> str:
        """'static <decl> Name<def>' prefix shared by every factory."""
        sig = self.signature
        declaration = sig.generic_declaration(throwing)
        prefix = f"{INDENT}static {declaration} " if declaration else f"{INDENT}static "
        return prefix + sig.class_name(throwing) + sig.generic_definition(throwing)

    def _cast(self, throwing: bool) -> str:
        """Cast from the wildcard singleton type, needed only for generic interfaces."""
        sig = self.signature
        if not sig.has_generic(throwing):
            return ""
        return f"({sig.class_name(throwing)}{sig.generic_definition(throwing)}) "

    def _singleton(self, throwing: bool, field_name: str, body: str) -> list[str]:
        sig = self.signature
        return [
            f"{INDENT}{sig.class_name(throwing)}{sig.generic_wildcard(throwing)} {field_name} "
            f"= ({self._param_invocation()}) -> {body};",
        ]

    def _zero_value(self) -> str:
        """Canonical zero value expression of the return type."""
        token = self.signature.return_token
        if token.is_generic:
            return "null"
        return f"{CONSTANTS_CLASS}.{token.constant_prefix}_ZERO"

    def _factory_members(self, throwing: bool) -> list[list[str]]:
        if self.signature.returns_boolean:
            return self._boolean_members(throwing)
        return self._empty_members(throwing)

    def _boolean_members(self, throwing: bool) -> list[list[str]]:
        sig = self.signature
        name = sig.class_name(throwing)
        constant = javadoc([
            f"Returns the shared {name} instance that always returns the given value.",
            "",
            "@param value the constant result.",
            "@return {@link #DEFAULT_TRUE} if value is true, otherwise {@link #DEFAULT_FALSE}.",
        ], INDENT)
        if sig.has_generic(throwing):
            constant.append(UNCHECKED)
        constant += [
            f"{self._static_header(throwing)} constant(boolean value) {{",
            f"{INDENT * 2}return {self._cast(throwing)}(value ? DEFAULT_TRUE : DEFAULT_FALSE);",
            f"{INDENT}}}",
        ]
        return [
            javadoc([f"{name} instance that always returns true."], INDENT)
            + self._singleton(throwing, "DEFAULT_TRUE", f"{CONSTANTS_CLASS}.BOOLEAN_TRUE"),
            javadoc([f"{name} instance that always returns false."], INDENT)
            + self._singleton(throwing, "DEFAULT_FALSE", f"{CONSTANTS_CLASS}.BOOLEAN_FALSE"),
            constant,
        ]

    def _empty_members(self, throwing: bool) -> list[list[str]]:
        sig = self.signature
        name = sig.class_name(throwing)
        if sig.kind is Kind.CONSUMER:
            described = "does nothing"
            body = "{}"
        else:
            zero = self._zero_value()
            described = "always returns null" if zero == "null" else f"always returns {{@link {zero.replace('.', '#')}}}"
            body = zero

        empty = javadoc([
            f"Returns the shared {name} instance that {described}.",
            "",
            "@return the empty instance.",
        ], INDENT)
        if sig.has_generic(throwing):
            empty.append(UNCHECKED)
        empty += [
            f"{self._static_header(throwing)} empty() {{",
            f"{INDENT * 2}return {self._cast(throwing)}EMPTY;",
            f"{INDENT}}}",
        ]
        members = [
            javadoc([f"{name} instance that {described}."], INDENT)
            + self._singleton(throwing, "EMPTY", body),
            empty,
        ]
        if sig.kind is not Kind.CONSUMER:
            members.append(javadoc([
                "Creates an instance that ignores its parameters and always returns the given value.",
                "",
                "@param value the constant result.",
                "@return an instance always returning {@code value}.",
            ], INDENT) + [
                f"{self._static_header(throwing)} constant({sig.return_type} value) {{",
                f"{INDENT * 2}return ({self._param_invocation()}) -> value;",
                f"{INDENT}}}",
            ])
        return members
