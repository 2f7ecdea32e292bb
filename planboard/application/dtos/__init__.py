from .board_dtos import BoardView, StageBar, UnitRow

__all__ = ["BoardView", "StageBar", "UnitRow"]
