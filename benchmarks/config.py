"""Settings for the benchmark runner, read from the environment and CLI."""

import os
import subprocess
from dataclasses import dataclass, field
from typing import List, Optional

DISTRIBUTIONS = ("uniform", "sequential", "reversed")

_ENV_PREFIX = "BENCHMARK_"


def _env(name: str, default: str) -> str:
    return os.environ.get(_ENV_PREFIX + name, default)


def _env_flag(name: str) -> bool:
    return _env(name, "").lower() in ("1", "true", "yes")


@dataclass
class BenchmarkConfig:
    """
    Knobs for one benchmark session.

    ``distribution`` is the order keys are put in; ``hit_ratio`` is the
    share of lookups that target a stored key.
    """

    seed: int = 42
    sizes: List[int] = field(default_factory=lambda: [100, 1000, 10_000])
    repetitions: int = 20
    distribution: str = "uniform"
    hit_ratio: float = 0.8
    skip_warmup: bool = False
    log_level: str = "INFO"

    def __post_init__(self):
        if self.distribution not in DISTRIBUTIONS:
            raise ValueError(
                f"Unknown distribution {self.distribution!r}, expected one of {DISTRIBUTIONS}"
            )
        if not 0.0 <= self.hit_ratio <= 1.0:
            raise ValueError(f"hit_ratio must lie in [0, 1], got {self.hit_ratio}")

    @classmethod
    def from_env(cls) -> "BenchmarkConfig":
        """
        Build a config from ``BENCHMARK_*`` variables.

        ``BENCHMARK_SIZES`` is a comma separated list; unset variables keep
        the dataclass defaults.
        """
        config = cls(
            seed=int(_env("SEED", "42")),
            repetitions=int(_env("REPETITIONS", "20")),
            distribution=_env("DISTRIBUTION", "uniform"),
            hit_ratio=float(_env("HIT_RATIO", "0.8")),
            skip_warmup=_env_flag("SKIP_WARMUP"),
            log_level=_env("LOG_LEVEL", "INFO"),
        )
        sizes = _env("SIZES", "")
        if sizes:
            config.sizes = [int(s) for s in sizes.split(",") if s.strip()]
        return config


def get_git_commit_hash() -> Optional[str]:
    """Commit of the checkout holding this package, or None outside git."""
    repo_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    try:
        out = subprocess.run(
            ["git", "rev-parse", "--short=12", "HEAD"],
            capture_output=True,
            text=True,
            check=True,
            cwd=repo_root,
        )
    except (subprocess.CalledProcessError, FileNotFoundError):
        return None
    return out.stdout.strip() or None


@dataclass
class BenchmarkMetadata:
    """What a reported table was measured on."""

    commit_hash: Optional[str]
    config: BenchmarkConfig
    size: int
    repetitions: int

    def __str__(self) -> str:
        c = self.config
        return "\n".join([
            f"Commit: {self.commit_hash or 'unknown'}",
            f"n = {self.size}, repetitions = {self.repetitions}, seed = {c.seed}",
            f"Distribution: {c.distribution}, lookup hit ratio: {c.hit_ratio:.2f}",
        ])
