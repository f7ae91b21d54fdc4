class BaseError(Exception):
    """
    Base package exception.
    """


class InvalidArgumentError(BaseError, ValueError):
    """
    Item handle or heap argument is absent, foreign or otherwise invalid.
    """


class InvalidKeyError(BaseError, ValueError):
    """
    Key rejected by the heap key validator.
    """


class EmptyHeapError(BaseError, IndexError):
    """
    Operation requires at least one element but the heap is empty.
    """
