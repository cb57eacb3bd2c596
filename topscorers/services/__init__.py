from .score_service import ScoreService

__all__ = ["ScoreService"]
