from .board_placement import BoardPlacement

__all__ = ["BoardPlacement"]
