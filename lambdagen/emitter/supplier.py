"""
Supplier interfaces: zero-parameter providers of one element type.
"""

from ..config import GeneratorConfig
from ..signature import SupplierSignature
from ..types import GenerationError
from .base import EmitterBase

JDK_SUPPLIER = "java.util.function.Supplier"


class SupplierEmitter(EmitterBase):
    """Emits ``<Type>Supplier`` and ``<Type>SupplierThrow``.

    The generic supplier also extends the JDK ``Supplier``.
    """

    def __init__(self, signature: SupplierSignature, config: GeneratorConfig):
        if not isinstance(signature, SupplierSignature):
            raise GenerationError(f"SupplierEmitter needs a SupplierSignature, got {type(signature).__name__}")
        super().__init__(signature, config)

    def _extends_jdk(self, throwing: bool) -> bool:
        # The throwing variant inherits it through the non-throwing one
        return self.signature.element.is_generic and not throwing

    def _imports(self, throwing: bool) -> list[str]:
        return [JDK_SUPPLIER] if self._extends_jdk(throwing) else []

    def _declaration(self, throwing: bool) -> str:
        if not self._extends_jdk(throwing):
            return super()._declaration(throwing)
        sig = self.signature
        return (f"public interface {sig.class_name(False)}{sig.generic_declaration(False)} "
                f"extends Supplier{sig.generic_definition(False)} {{")
