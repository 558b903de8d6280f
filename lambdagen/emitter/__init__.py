"""
Java source emitters package.
"""

from ..signature import SupplierSignature
from .base import EmitterBase
from .constants import ConstantsEmitter
from .docs import javadoc
from .generator import InterfaceEmitter
from .supplier import SupplierEmitter

__all__ = [
    'EmitterBase',
    'ConstantsEmitter',
    'InterfaceEmitter',
    'SupplierEmitter',
    'javadoc',
    'emitter_for',
]


def emitter_for(signature, config) -> EmitterBase:
    """Pick the emitter matching a signature's family."""
    if isinstance(signature, SupplierSignature):
        return SupplierEmitter(signature, config)
    return InterfaceEmitter(signature, config)
