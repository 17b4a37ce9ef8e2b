# -*- coding: utf-8 -*-
"""
Centralised Configuration for the TOPSIS Ranking Library
=========================================================

All configurable parameters are defined here as typed dataclasses.
The master ``Config`` class composes every sub-config and provides
serialisation, summary printing, and global singleton management.

Configuration Groups
--------------------
- PathConfig     — output / log directory structure
- TOPSISConfig   — degenerate-input handling of the ranking pipeline
- LoggingConfig  — console and debug log behaviour
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional
from enum import Enum
import json


# =========================================================================
# Enumerations
# =========================================================================

class ZeroNormPolicy(Enum):
    """Reaction to a criterion column whose Euclidean norm is zero."""
    PROPAGATE = "propagate"
    RAISE = "raise"


# =========================================================================
# Path Configuration
# =========================================================================

@dataclass
class PathConfig:
    """File and directory paths, all derived from *base_dir*."""
    base_dir: Path = field(default_factory=lambda: Path.cwd())

    @property
    def output_dir(self) -> Path:
        return self.base_dir / "outputs"

    @property
    def logs_dir(self) -> Path:
        return self.output_dir / "logs"

    def ensure_directories(self) -> None:
        """Create every output directory if missing."""
        for d in [self.output_dir, self.logs_dir]:
            d.mkdir(parents=True, exist_ok=True)


# =========================================================================
# TOPSIS Parameters
# =========================================================================

@dataclass
class TOPSISConfig:
    """TOPSIS configuration.

    Parameters
    ----------
    zero_norm_policy : ZeroNormPolicy
        ``PROPAGATE`` turns an all-zero column into NaN scores that rank
        last; ``RAISE`` fails with ``DegenerateColumnError``.
    degenerate_score : float
        Closeness assigned when D+ + D- == 0, i.e. every column is constant
        (always the case for a single alternative).
    """
    zero_norm_policy: ZeroNormPolicy = ZeroNormPolicy.PROPAGATE
    degenerate_score: float = 0.5


# =========================================================================
# Logging
# =========================================================================

@dataclass
class LoggingConfig:
    """Console / debug logging defaults."""
    level: str = "INFO"
    use_color: Optional[bool] = None   # None → auto-detect terminal
    debug_json: bool = True


# =========================================================================
# Master Configuration
# =========================================================================

@dataclass
class Config:
    """Master configuration composing every sub-config."""
    paths: PathConfig = field(default_factory=PathConfig)
    topsis: TOPSISConfig = field(default_factory=TOPSISConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    # --- convenience properties ---

    @property
    def output_dir(self) -> str:
        return str(self.paths.output_dir)

    # --- serialisation ---

    def to_dict(self) -> Dict:
        def _cvt(obj):
            if hasattr(obj, '__dataclass_fields__'):
                return {k: _cvt(v) for k, v in obj.__dict__.items()}
            if isinstance(obj, Enum):
                return obj.value
            if isinstance(obj, Path):
                return str(obj)
            if isinstance(obj, (list, tuple)):
                return [_cvt(i) for i in obj]
            if isinstance(obj, dict):
                return {k: _cvt(v) for k, v in obj.items()}
            return obj
        return _cvt(self)

    @classmethod
    def from_dict(cls, data: Dict) -> 'Config':
        paths = data.get('paths', {})
        topsis = dict(data.get('topsis', {}))
        if 'zero_norm_policy' in topsis:
            topsis['zero_norm_policy'] = ZeroNormPolicy(topsis['zero_norm_policy'])
        return cls(
            paths=PathConfig(base_dir=Path(paths['base_dir']))
            if 'base_dir' in paths else PathConfig(),
            topsis=TOPSISConfig(**topsis),
            logging=LoggingConfig(**data.get('logging', {})),
        )

    def save(self, filepath: Path) -> None:
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load(cls, filepath: Path) -> 'Config':
        with open(filepath) as f:
            return cls.from_dict(json.load(f))

    def summary(self) -> str:
        return (
            f"\n{'='*72}\n"
            f"  TOPSIS Configuration Summary\n"
            f"{'='*72}\n\n"
            f"  TOPSIS\n"
            f"    Zero-norm policy : {self.topsis.zero_norm_policy.value}\n"
            f"    Degenerate score : {self.topsis.degenerate_score}\n\n"
            f"  LOGGING\n"
            f"    Level            : {self.logging.level}\n"
            f"    Debug JSON       : {self.logging.debug_json}\n"
            f"    Output dir       : {self.output_dir}\n"
            f"{'='*72}\n"
        )


# =========================================================================
# Global Config Singleton
# =========================================================================

_config: Optional[Config] = None


def get_config() -> Config:
    """Return global config (create default on first call)."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def get_default_config() -> Config:
    """Return a *fresh* default Config instance."""
    return Config()


def set_config(config: Config) -> None:
    """Replace the global config singleton."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset to a fresh default Config."""
    global _config
    _config = Config()
