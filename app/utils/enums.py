from enum import Enum

class Grade(str, Enum):
    A_PLUS = "A+"
    A = "A"
    B_PLUS = "B+"
    B = "B"
    C = "C"
    UNSCORED = "-"  # Column default, replaced as soon as a record is scored
