""" runtime settings, read from EPICYCLES_* environment variables or a .env file """

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """ class holding every tunable value; numeric values must be positive """

    log_level: str = "info"

    # drawing surface
    grid_size: int = Field(156, gt=0)       # number of cells along each side of the drawing panel
    window_size: int = Field(500, gt=0)     # side length of each panel in pixels

    # numerical pipeline
    sample_count: int = Field(200, gt=0)        # points after arc-length resampling
    max_components: int = Field(1000, gt=0)     # upper bound on arrows kept after ranking by amplitude
    frame_steps: int = Field(200, gt=0)         # precomputed frames per revolution

    # playback
    playback_speed: float = Field(0.3, gt=0)    # fractional frames advanced per tick
    fps: int = Field(60, gt=0)
    draw_circles: bool = False

    model_config = {"env_prefix": "EPICYCLES_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}

    @property
    def cell_size(self) -> float:
        """ width of one grid cell in pixels """
        return self.window_size / self.grid_size


settings = Settings()
