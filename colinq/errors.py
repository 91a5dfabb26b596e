class CollectionModifiedError(RuntimeError):
    """raised when a container is structurally mutated while a callback iteration over it is running."""
    pass
