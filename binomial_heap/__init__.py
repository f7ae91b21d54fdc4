from . import common, exceptions
from .common import Item, Node, default_key_validator
from .exceptions import BaseError, EmptyHeapError, InvalidArgumentError, InvalidKeyError
from .heap import BinomialHeap

__all__ = [
    'BaseError',
    'BinomialHeap',
    'EmptyHeapError',
    'InvalidArgumentError',
    'InvalidKeyError',
    'Item',
    'Node',
    'default_key_validator',
]
