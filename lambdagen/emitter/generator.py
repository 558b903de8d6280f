"""
Interface emitter for Function, Consumer, Predicate and Operator signatures.
"""

from ..config import GeneratorConfig
from ..signature import SignatureSpec
from ..types import GenerationError
from .base import EmitterBase
from .factories import FactoryMixin


class InterfaceEmitter(FactoryMixin, EmitterBase):
    """Emits the two source variants of one parameterized functional interface."""

    def __init__(self, signature: SignatureSpec, config: GeneratorConfig):
        if not isinstance(signature, SignatureSpec):
            raise GenerationError(f"InterfaceEmitter needs a SignatureSpec, got {type(signature).__name__}")
        super().__init__(signature, config)

    def _imports(self, throwing: bool) -> list[str]:
        token = self.signature.return_token
        if token is not None and token.is_primitive:
            return [self.config.constants_class]
        return []

    def _param_declaration(self) -> str:
        return self.signature.param_declaration()

    def _param_invocation(self) -> str:
        return self.signature.param_invocation()

    def _param_docs(self) -> list[str]:
        return [
            f"@param {pname} parameter {i + 1}, of type {ptype}."
            for i, (ptype, pname) in enumerate(self.signature.parameters())
        ]

    def _members(self, throwing: bool) -> list[list[str]]:
        return self._factory_members(throwing)
