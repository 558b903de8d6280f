"""
Common skeleton of an emitted interface.
"""

from ..config import GeneratorConfig
from .docs import DocCommentMixin
from .methods import MethodMixin


class EmitterBase(DocCommentMixin, MethodMixin):
    """Assembles package, imports, type declaration and methods of one interface.

    Subclasses supply the parameter list and any constant/factory members.
    """

    def __init__(self, signature, config: GeneratorConfig):
        self.signature = signature
        self.config = config

    @property
    def package(self) -> str:
        return self.config.kind_package(self.signature.kind)

    def file_name(self, throwing: bool) -> str:
        return self.signature.class_name(throwing) + ".java"

    # ---- hooks ----

    def _imports(self, throwing: bool) -> list[str]:
        return []

    def _param_declaration(self) -> str:
        return ""

    def _param_invocation(self) -> str:
        return ""

    def _param_docs(self) -> list[str]:
        return []

    def _members(self, throwing: bool) -> list[list[str]]:
        return []

    # ---- assembly ----

    def _declaration(self, throwing: bool) -> str:
        sig = self.signature
        line = f"public interface {sig.class_name(throwing)}{sig.generic_declaration(throwing)}"
        if throwing:
            line += f" extends {sig.class_name(False)}{sig.generic_definition(False)}"
        return line + " {"

    def _sections(self, throwing: bool) -> list[list[str]]:
        sections = list(self._members(throwing))
        sections.append(self._abstract_method(throwing))
        if throwing:
            sections.append(self._bridge_method())
        return sections

    def generate(self, throwing: bool) -> str:
        """Return the complete source text of the non-throwing or throwing variant."""
        lines = [f"package {self.package};", ""]
        imports = self._imports(throwing)
        if imports:
            lines.extend(f"import {name};" for name in imports)
            lines.append("")
        lines.extend(self._type_doc(throwing))
        lines.append("@FunctionalInterface")
        lines.append(self._declaration(throwing))
        for section in self._sections(throwing):
            lines.append("")
            lines.extend(section)
        lines.append("}")
        return "\n".join(lines) + "\n"

    def generate_pair(self) -> dict[str, str]:
        """Both variants keyed by file name."""
        return {self.file_name(throwing): self.generate(throwing) for throwing in (False, True)}
