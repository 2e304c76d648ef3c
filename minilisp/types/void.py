from __future__ import annotations


class VoidType:
    """The absence of a value: what define returns, and if with a false condition."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Void"
    def __str__(self): return "#<void>"
    def __bool__(self): return False


Void = VoidType()
