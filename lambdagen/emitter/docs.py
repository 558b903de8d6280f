"""
Javadoc generation for emitted interfaces.
"""

from ..types import Kind

INDENT = "    "


def javadoc(lines: list[str], indent: str = "") -> list[str]:
    """Wrap text lines in a /** ... */ block. Empty strings become bare ' *' lines."""
    result = [f"{indent}/**"]
    for line in lines:
        result.append(f"{indent} * {line}" if line else f"{indent} *")
    result.append(f"{indent} */")
    return result


def _plural(count: int, word: str) -> str:
    return f"{count} {word}" if count == 1 else f"{count} {word}s"


def _article(word: str) -> str:
    return f"an {word}" if word[:1].lower() in ("a", "e", "i", "o", "u") else f"a {word}"


class DocCommentMixin:
    """Mixin providing type and method documentation."""

    # Expected from the emitter
    signature: any
    config: any
    _param_docs: callable

    def _summary(self) -> str:
        """One-sentence description of what the interface does."""
        sig = self.signature
        kind = sig.kind
        if kind is Kind.SUPPLIER:
            return f"Supplies {_article(sig.return_type)} value on demand."
        if kind is Kind.OPERATOR:
            return (f"An operation on {_plural(sig.arity, sig.element.runtime_name + ' parameter')} "
                    f"producing {_article(sig.return_type)} result.")
        subject = f"An operation that accepts {_plural(sig.arity, 'parameter')}"
        if kind is Kind.CONSUMER:
            return subject + " and returns no result."
        if kind is Kind.PREDICATE:
            return subject + " and returns a boolean."
        return subject + " and returns a result."

    def _type_param_docs(self, throwing: bool) -> list[str]:
        sig = self.signature
        docs = []
        for i, token in enumerate(getattr(sig, "param_tokens", ())):
            if token.is_generic:
                docs.append(f"@param <{token.param_type(i)}> the type of parameter {i + 1}.")
        if sig.kind is Kind.SUPPLIER:
            if sig.element.is_generic:
                docs.append(f"@param <{sig.return_type}> the type of the supplied value.")
        elif sig.has_generic_return:
            docs.append(f"@param <{sig.return_type}> the type of the result.")
        if throwing:
            docs.append("@param <E> the exception type, a subclass of {@link Exception}.")
        return docs

    def _type_doc(self, throwing: bool) -> list[str]:
        sig = self.signature
        lines = [self._summary()]
        if throwing:
            lines.append(f"Extends {{@link {sig.class_name(False)}}} with a method that may throw a checked exception.")
        lines.append("")
        lines.extend(self._type_param_docs(throwing))
        if self.config.author:
            lines.append(f"@author {self.config.author}")
        return javadoc(lines)

    def _return_doc(self) -> list[str]:
        sig = self.signature
        if sig.return_type == "void":
            return []
        if sig.returns_boolean:
            return ["@return the boolean result of the test."]
        return [f"@return the {sig.return_type} result."]

    def _method_doc(self, throwing: bool) -> list[str]:
        sig = self.signature
        if sig.kind is Kind.SUPPLIER:
            first = f"Gets {_article(sig.return_type)} value."
        else:
            first = f"Performs this operation on the given {_plural(sig.arity, 'parameter')}."
        lines = [first, ""]
        lines.extend(self._param_docs())
        lines.extend(self._return_doc())
        if throwing:
            lines.append("@throws E if the operation fails.")
        return javadoc(lines, INDENT)

    def _bridge_doc(self) -> list[str]:
        throw_name = self.signature.method_name + "Throw"
        lines = [
            f"Calls {{@link #{throw_name}}} and rethrows any exception it raises",
            "as an unchecked {@link RuntimeException} carrying the original cause.",
            "",
        ]
        lines.extend(self._param_docs())
        lines.extend(self._return_doc())
        return javadoc(lines, INDENT)
