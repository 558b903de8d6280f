"""
Abstract method and exception-bridging default method.
"""

from .docs import INDENT

EXCEPTION_CLAUSE = " throws E"


class MethodMixin:
    """Mixin providing the functional method and, in throw mode, its bridge."""

    # Expected from the emitter
    signature: any
    _method_doc: callable
    _bridge_doc: callable
    _param_declaration: callable
    _param_invocation: callable

    def _abstract_method(self, throwing: bool) -> list[str]:
        sig = self.signature
        name = sig.method_name + ("Throw" if throwing else "")
        clause = EXCEPTION_CLAUSE if throwing else ""
        return self._method_doc(throwing) + [
            f"{INDENT}{sig.return_type} {name}({self._param_declaration()}){clause};",
        ]

    def _bridge_method(self) -> list[str]:
        """Default method that delegates to the throwing variant and wraps its exceptions."""
        sig = self.signature
        throw_name = sig.method_name + "Throw"
        call = f"this.{throw_name}({self._param_invocation()});"
        if sig.return_type != "void":
            call = "return " + call
        body = INDENT * 2
        return self._bridge_doc() + [
            f"{INDENT}@Override",
            f"{INDENT}default {sig.return_type} {sig.method_name}({self._param_declaration()}) {{",
            f"{body}try {{",
            f"{body}{INDENT}{call}",
            f"{body}}} catch (Exception e) {{",
            f"{body}{INDENT}throw new RuntimeException(\"Exception for '{throw_name}'\", e);",
            f"{body}}}",
            f"{INDENT}}}",
        ]
