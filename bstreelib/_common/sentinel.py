"""Marker for the payload of an empty root node."""


class _Empty:
    """Singleton standing in for "no payload".

    A dedicated marker lets ``None`` be stored as an ordinary payload.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "EMPTY"

    def __bool__(self) -> bool:
        return False

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_Empty, ())


EMPTY = _Empty()
