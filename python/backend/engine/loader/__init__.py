from backend.engine.loader.loader import BoardFormatError, BoardLoader

__all__ = ["BoardFormatError", "BoardLoader"]
