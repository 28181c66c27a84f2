import os
from dataclasses import dataclass


def env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


@dataclass
class DungeonConfig:
    width: int = 40
    height: int = 24
    min_rooms: int = 5
    max_rooms: int = 10
    min_size: int = 3
    max_size: int = 8
    room_attempts: int = 100
    min_corridors: int = 3
    max_corridors: int = 5
    corridor_attempts: int = 20
    enable_metrics: bool = True

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"grid dimensions must be positive, got {self.width}x{self.height}")

    @classmethod
    def from_env(cls, **overrides) -> "DungeonConfig":
        """Build a config from ``ROGUEGRID_*`` environment variables.

        Explicit keyword overrides win over the environment.
        """
        values = {
            "width": env_int("ROGUEGRID_MAP_WIDTH", cls.width),
            "height": env_int("ROGUEGRID_MAP_HEIGHT", cls.height),
            "enable_metrics": os.getenv("ROGUEGRID_ENABLE_GENERATION_METRICS", "1").lower()
            not in {"0", "false", "no", ""},
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


__all__ = ["DungeonConfig", "env_int"]
