"""
Error types for genetic operators

Every operator reports precondition violations by raising one of these.
"""


class GAError(Exception):
    """Base class for all operator errors"""


class LengthMismatch(GAError, ValueError):
    """Two chromosomes that must have equal length do not"""

    def __init__(self, length_a: int, length_b: int):
        self.length_a = length_a
        self.length_b = length_b
        super().__init__(f"Chromosome lengths differ: {length_a} != {length_b}")


class InvalidInput(GAError, ValueError):
    """An argument is outside the range an operator accepts"""
