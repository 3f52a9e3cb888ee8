from __future__ import annotations


class UnitType:
    """The absence of a value, returned by binding and side-effecting forms."""

    _instance: UnitType | None = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "Unit"
    def __str__(self): return "void"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, UnitType)

    def __hash__(self):
        return hash(UnitType)


Unit = UnitType()
