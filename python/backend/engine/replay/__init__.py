from backend.engine.replay.replay import Replay

__all__ = ["Replay"]
