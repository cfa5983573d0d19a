# gambit/config.py
from dataclasses import dataclass, field
from typing import Dict, Optional
import os
import tomllib

# Defaults (centipawns)
PIECE_VALUES = {
    "pawn": 100,
    "knight": 320,
    "bishop": 330,
    "rook": 500,
    "queen": 900,
    "king": 20000,
}

# Search depth per minimax difficulty tier; beginner/easy never search.
DIFFICULTY_DEPTHS = {
    "normal": 2,
    "hard": 3,
    "expert": 4,
    "master": 5,
}

@dataclass
class SearchConfig:
    difficulty: str = "normal"
    depths: Dict[str, int] = field(default_factory=lambda: DIFFICULTY_DEPTHS.copy())
    easy_capture_probability: float = 0.7
    seed: Optional[int] = None  # None means an unseeded random source

@dataclass
class EvalConfig:
    piece_values: Dict[str, int] = field(default_factory=lambda: PIECE_VALUES.copy())
    # king table switches to endgame below this much non-king material
    endgame_threshold: int = 1000

@dataclass
class RulesConfig:
    # False keeps the historical behaviour: castling out of or through check is allowed
    strict_castling: bool = False
    # False treats any two bishops as a dead draw regardless of square colour
    strict_bishop_draw: bool = False
    fifty_move_limit: int = 100  # half-moves

@dataclass
class ApiConfig:
    engine_name: str = "Gambit"
    engine_author: str = "Gambit developers"
    api_port: int = 8000

@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    eval: EvalConfig = field(default_factory=EvalConfig)
    rules: RulesConfig = field(default_factory=RulesConfig)
    api: ApiConfig = field(default_factory=ApiConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = "config.toml") -> "Config":
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        with open(path, "rb") as f:
            raw = tomllib.load(f)
        for section in ("search", "eval", "rules", "api"):
            if section in raw:
                target = getattr(cfg, section)
                for k, v in raw[section].items():
                    if not hasattr(target, k):
                        continue
                    current = getattr(target, k)
                    if isinstance(current, dict) and isinstance(v, dict):
                        # tables merge key by key so a partial override keeps the other entries
                        v = {**current, **v}
                    setattr(target, k, v)
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"]).upper()
        return cfg

    def apply_env(self, environ=None) -> "Config":
        """Apply GAMBIT_* environment overrides; malformed values are ignored."""
        environ = os.environ if environ is None else environ
        difficulty = environ.get("GAMBIT_DIFFICULTY")
        if difficulty and (difficulty in self.search.depths or difficulty in ("beginner", "easy")):
            self.search.difficulty = difficulty
        level = environ.get("GAMBIT_LOG_LEVEL")
        if level and level.upper() in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            self.log_level = level.upper()
        return self

# single globally importable config instance
CONFIG = Config.load_from_toml(os.environ.get("GAMBIT_CONFIG_TOML", "config.toml")).apply_env()
