class SelectionError(Exception):
    """
    Base class for rejected session operations. The session state is never
    modified when one of these is raised.
    """


class CapacityExceeded(SelectionError):
    def __init__(self, capacity: int):
        super().__init__(f"Already holding the maximum of {capacity} words")
        self.capacity = capacity


class InvalidSelection(SelectionError):
    pass


class IndexOutOfRange(SelectionError):
    def __init__(self, index: int, length: int):
        super().__init__(f"No confirmed word at position {index} (have {length})")
        self.index = index
        self.length = length
