from enum import IntEnum


class ControlCode(IntEnum):
    """Reserved codes written with the current code width."""
    LITERAL_8 = 0
    LITERAL_16 = 1
    END = 2


FIRST_CODE = len(ControlCode)
