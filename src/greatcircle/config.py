from dataclasses import dataclass
from typing import Optional


@dataclass
class GreatCircleConfig:
    """Configuration for the greatcircle CLI."""

    segments: int = 64
    log_level: str = "WARNING"
    map_output: Optional[str] = None
    open_map: bool = False
