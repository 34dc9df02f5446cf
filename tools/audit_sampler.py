#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

from frontierkit.config import load_config
from frontierkit.logger import ExperimentLogger
from frontierkit.sampling import WeightedSampler, audit_sampler_frequencies


def _parse_weights(text: str) -> List[float]:
    try:
        return [float(x) for x in text.split(",") if x.strip()]
    except ValueError as exc:
        raise SystemExit(f"Invalid --weights: {text}") from exc


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Check a weighted sampler's draw frequencies against its weights.")
    ap.add_argument("--weights", type=str, required=True, help="Comma separated weights, e.g. 1,1,2.")
    ap.add_argument("--config", type=str, default="configs/default.yaml", help="YAML settings file (defaults if missing).")
    ap.add_argument("--draws", type=int, default=None, help="Number of draws.")
    ap.add_argument("--seed", type=int, default=None, help="Random seed.")
    ap.add_argument("--out", type=str, default="", help="Optional JSON output path.")
    args = ap.parse_args(argv)

    cfg = load_config(args.config, seed=args.seed, audit_draws=args.draws)
    weights = _parse_weights(args.weights)
    sampler = WeightedSampler(list(range(len(weights))), weights, rng=cfg.seed)
    report = audit_sampler_frequencies(sampler, n=cfg.audit_draws, alpha=cfg.audit_alpha)

    text = json.dumps(report, indent=2)
    if args.out:
        out = Path(args.out)
        ExperimentLogger(out.parent).log("sampler.audit", {"weights": weights, "consistent": report["consistent"]})
        out.write_text(text, encoding="utf-8")
        print(f"Wrote: {out}")
    else:
        print(text)
    return 0 if report["consistent"] else 1


if __name__ == "__main__":
    raise SystemExit(main())
