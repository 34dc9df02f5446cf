from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .ordering import Ordering


@dataclass(frozen=True)
class ToolkitConfig:
    """Settings shared by containers, samplers and the MDP solvers.

    Serializable to a plain dict so a run can record what it used.
    """

    ordering: str = "ascending"
    seed: Optional[int] = None

    # MDP solvers
    gamma: float = 0.9
    epsilon: float = 0.001
    max_iterations: int = 20
    policy_eval_k: int = 20

    # Sampler audit
    audit_draws: int = 3000
    audit_alpha: float = 0.001

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @property
    def order(self) -> Ordering:
        return Ordering.coerce(self.ordering)

    def validate(self) -> None:
        Ordering.coerce(self.ordering)
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise ValueError("seed must be an integer or null")
        if not (0 < self.gamma <= 1):
            raise ValueError("gamma must be in (0, 1]")
        if self.epsilon <= 0:
            raise ValueError("epsilon must be positive")
        if self.max_iterations <= 0 or self.policy_eval_k <= 0:
            raise ValueError("iteration counts must be positive")
        if self.audit_draws <= 0:
            raise ValueError("audit_draws must be positive")
        if not (0 < self.audit_alpha < 1):
            raise ValueError("audit_alpha must be in (0, 1)")


def load_config(yaml_path: str | Path | None = None, **overrides: Any) -> ToolkitConfig:
    """Load settings from YAML, falling back to defaults for missing keys.

    A missing file yields the default configuration. Keyword overrides whose
    value is not None win over the file.
    """
    raw: Dict[str, Any] = {}
    if yaml_path is not None:
        p = Path(yaml_path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config root must be a mapping: {yaml_path}")

    known = {f.name for f in fields(ToolkitConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    cfg = ToolkitConfig(**raw)
    cfg = replace(cfg, **{k: v for k, v in overrides.items() if v is not None})
    cfg.validate()
    return cfg
