"""
Run parameters for a single percolation run.

Defaults reproduce the reference run: a 20x20x20 lattice at p = 0.15,
unseeded, written to the current directory.
"""

import json
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional, Dict, Any


@dataclass
class Config:
    extent: int = 20
    probability: float = 0.15
    seed: Optional[int] = None
    output_dir: Path = field(default_factory=Path)

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)

    @classmethod
    def load(cls, path) -> "Config":
        """Read a JSON object of run parameters; unknown keys are an error."""
        with open(path) as f:
            entries = json.load(f)
        return cls(**entries)

    def updated(self, **overrides) -> "Config":
        """Copy with every override that is not None applied."""
        entries = self.to_dict()
        entries.update({k: v for k, v in overrides.items() if v is not None})
        return Config(**entries)

    def to_dict(self) -> Dict[str, Any]:
        entries = asdict(self)
        entries["output_dir"] = str(self.output_dir)
        return entries
