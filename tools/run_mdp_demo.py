#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import List, Optional

import matplotlib

matplotlib.use("Agg")
import pandas as pd  # noqa: E402

from frontierkit.config import load_config  # noqa: E402
from frontierkit.logger import ExperimentLogger  # noqa: E402
from frontierkit.mdp import optimal_policy, policy_iteration, sequential_decision_environment, value_iteration  # noqa: E402
from frontierkit.plotting import plot_utility_grid  # noqa: E402


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Solve the 4x3 grid MDP with value and policy iteration.")
    ap.add_argument("--outdir", type=str, default="_mdp_out", help="Output directory.")
    ap.add_argument("--config", type=str, default="configs/default.yaml", help="YAML settings file (defaults if missing).")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the random initial policy.")
    ap.add_argument("--epsilon", type=float, default=None, help="Value iteration tolerance.")
    ap.add_argument("--max-iterations", type=int, default=None, help="Value iteration sweep limit.")
    ap.add_argument("--living-reward", type=float, default=0.0, help="Reward of every non-terminal cell.")
    args = ap.parse_args(argv)

    cfg = load_config(args.config, seed=args.seed, epsilon=args.epsilon, max_iterations=args.max_iterations)
    outdir = Path(args.outdir)
    logger = ExperimentLogger(outdir)
    logger.log("run.config", cfg.to_dict())

    mdp = sequential_decision_environment(living_reward=float(args.living_reward), gamma=cfg.gamma)

    U = value_iteration(mdp, epsilon=cfg.epsilon, max_iterations=cfg.max_iterations, logger=logger)
    pi_vi = optimal_policy(mdp, U)
    pi_pi = policy_iteration(mdp, k=cfg.policy_eval_k, rng=cfg.seed, logger=logger)

    utilities = mdp.show_grid(U)
    arrows_vi = mdp.to_arrows(pi_vi)
    arrows_pi = mdp.to_arrows(pi_pi)

    utilities.to_csv(outdir / "utilities.csv")
    arrows_vi.to_csv(outdir / "policy_value_iteration.csv")
    arrows_pi.to_csv(outdir / "policy_policy_iteration.csv")
    plot_utility_grid(utilities, outdir / "utilities.png", arrows=arrows_vi, title="Value iteration utilities")

    agree = bool((arrows_vi.astype(str) == arrows_pi.astype(str)).to_numpy().all())
    logger.log("run.done", {"policies_agree": agree, "utility_initial": U[mdp.initial]})

    with pd.option_context("display.width", 120):
        print(utilities.to_string())
        print(arrows_vi.to_string())
    print(json.dumps({"policies_agree": agree, "outdir": str(outdir)}))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
