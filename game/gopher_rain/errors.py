"""
Errors raised by the gameplay core
"""


class InvariantViolation(RuntimeError):
    """An internal gameplay invariant no longer holds"""


class PoolExhaustedError(InvariantViolation):
    """The spawn cooldown expired while every coin slot was active"""

    def __init__(self, capacity: int):
        super().__init__(f"No inactive coins available (pool capacity {capacity})")
        self.capacity = capacity
