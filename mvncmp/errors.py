from __future__ import annotations


class ItemComparisonError(TypeError):
    def __init__(self, left: object, right: object) -> None:
        self.left_type = type(left).__name__
        self.right_type = type(right).__name__
        super().__init__(f"bad comparison between {self.left_type} and {self.right_type}")
