from .base import DatabaseManager
from .connection import DatabaseConnection
from .memory import MemoryScoreStore
from .protocols import ScoreStore
from .score_manager import ScoreManager

__all__ = ["DatabaseConnection", "DatabaseManager", "MemoryScoreStore", "ScoreManager", "ScoreStore"]
