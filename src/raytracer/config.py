# raytracer/config.py
"""
Configuration settings for the ray tracer.
"""
import os
from dataclasses import dataclass
from typing import Optional

# Integrator settings
MAX_DEPTH = 50         # hard cap on scatter bounces per camera ray
T_MIN = 0.001          # near clip for secondary rays, avoids shadow acne

# Camera shutter (seconds)
SHUTTER_OPEN = 0.0
SHUTTER_DURATION = 1.0

# Command-line defaults
DEFAULT_NX = 64
DEFAULT_NY = 48
DEFAULT_SAMPLES = 100
DEFAULT_SCENE = "default"
SCENE_NAMES = ("default", "random", "test", "motionblur", "2spheres", "2perlinspheres")
OUTPUT_DIR_NAME = "raytracer"
OUTPUT_FILE_NAME = "out.png"

def default_workers() -> int:
    return os.cpu_count() or 1

@dataclass
class RenderSettings:
    """Parameters of a single render."""
    nx: int = DEFAULT_NX
    ny: int = DEFAULT_NY
    samples: int = DEFAULT_SAMPLES
    seed: int = 0
    scene: str = DEFAULT_SCENE
    width: Optional[int] = None
    height: Optional[int] = None
    workers: Optional[int] = None
    use_bvh: bool = False
    out: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        if self.width is None:
            self.width = self.nx
        if self.height is None:
            self.height = self.ny
        if self.workers is None:
            self.workers = default_workers()
        self.validate()

    def validate(self):
        for name in ("nx", "ny", "samples", "width", "height", "workers"):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f"{name} must be positive, got {value}")
        if self.scene not in SCENE_NAMES:
            raise ValueError(f"unknown scene {self.scene!r}, expected one of {', '.join(SCENE_NAMES)}")

    @property
    def aspect(self) -> float:
        return self.nx / self.ny

    @classmethod
    def from_args(cls, args, seed: int) -> "RenderSettings":
        """Build settings from a parsed argparse namespace and a resolved seed."""
        return cls(
            nx=args.nx,
            ny=args.ny,
            samples=args.samples_per_pixel,
            seed=seed,
            scene=args.scene,
            width=args.width,
            height=args.height,
            workers=args.workers,
            use_bvh=args.bvh,
            out=args.out,
            verbose=args.verbose,
        )
