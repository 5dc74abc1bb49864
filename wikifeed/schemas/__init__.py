from wikifeed.schemas.change import ChangeEvent, ChangeKind

__all__ = ["ChangeEvent", "ChangeKind"]
