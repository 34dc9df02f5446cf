"""Markov decision processes solved with value and policy iteration.

A consumer of the container toolkit: utilities and policies are plain
dicts keyed by state, and action selection goes through `argmax`.
"""
from __future__ import annotations

from typing import Any, Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

import numpy as np
import pandas as pd

from .helpers import ORIENTATIONS, argmax, turn_heading, vector_add
from .logger import ExperimentLogger
from .randomization import resolve_rng

State = Hashable
Action = Any
Transitions = List[Tuple[float, State]]


def _check_gamma(gamma: float) -> float:
    if not (0 < gamma <= 1):
        raise ValueError(f"The gamma of an MDP must be in (0, 1], got {gamma}")
    return float(gamma)


class MarkovDecisionProcess:
    """Sequential decision problem with a stochastic, fully observable environment.

    transitions maps state -> action -> [(probability, next_state), ...].
    Terminal states offer the single action None, which keeps the agent in
    place with probability weight 0 so their utility equals their reward.
    The discount `gamma` sets the preference for current over future rewards.
    """

    def __init__(
        self,
        initial: State,
        actions: Iterable[Action],
        terminals: Iterable[State],
        transitions: Mapping[State, Mapping[Action, Transitions]],
        reward: Mapping[State, float],
        *,
        states: Optional[Iterable[State]] = None,
        gamma: float = 0.9,
    ) -> None:
        self.gamma = _check_gamma(gamma)
        self.initial = initial
        self.action_list: List[Action] = list(actions)
        self.terminals: Set[State] = set(terminals)
        self.transitions = {s: dict(by_action) for s, by_action in transitions.items()}
        self.rewards: Dict[State, float] = {s: float(r) for s, r in reward.items()}
        if states is not None:
            self.states: Set[State] = set(states)
        else:
            self.states = set(self.rewards) | set(self.transitions) | self.terminals | {initial}

    def reward(self, state: State) -> float:
        if state not in self.rewards:
            raise KeyError(f"No reward defined for state {state!r}")
        return self.rewards[state]

    def transition_model(self, state: State, action: Action) -> Transitions:
        """List of (P(s'|s, a), s') pairs."""
        if action is None:
            return [(0.0, state)]
        if not self.transitions:
            raise ValueError("The transition model of this MDP is empty")
        return list(self.transitions[state][action])

    def actions(self, state: State) -> List[Action]:
        if state in self.terminals:
            return [None]
        return list(self.action_list)


class GridMDP(MarkovDecisionProcess):
    """Two-dimensional grid world.

    `grid[0]` is the bottom row; cells holding None are obstacles. States are
    (row, col) pairs and actions are unit headings, (1, 0) moving up. The
    intended move succeeds with probability 0.8 and the agent slips to
    either side with probability 0.1 each.
    """

    def __init__(
        self,
        grid: Sequence[Sequence[Optional[float]]],
        terminals: Iterable[State],
        *,
        initial: Tuple[int, int] = (0, 0),
        gamma: float = 0.9,
    ) -> None:
        self.grid = [list(row) for row in grid]
        self.rows = len(self.grid)
        self.cols = len(self.grid[0]) if self.grid else 0
        if any(len(row) != self.cols for row in self.grid):
            raise ValueError("grid rows must all have the same length")
        reward = {
            (r, c): float(value)
            for r, row in enumerate(self.grid)
            for c, value in enumerate(row)
            if value is not None
        }
        if initial not in reward:
            raise ValueError(f"initial state {initial} is not a free cell")
        super().__init__(initial, ORIENTATIONS, terminals, {}, reward, states=reward.keys(), gamma=gamma)

    def go_to(self, state: Tuple[int, int], direction: Tuple[int, int]) -> Tuple[int, int]:
        """Next state moving along `direction`; walls and obstacles leave it unchanged."""
        target = vector_add(state, direction)
        return target if target in self.states else state

    def transition_model(self, state: State, action: Action) -> Transitions:
        if action is None:
            return [(0.0, state)]
        return [
            (0.8, self.go_to(state, action)),
            (0.1, self.go_to(state, turn_heading(action, -1))),
            (0.1, self.go_to(state, turn_heading(action, 1))),
        ]

    def show_grid(self, mapping: Mapping[State, Any]) -> pd.DataFrame:
        """Lay `mapping` out on the grid, top row first."""
        rows = list(range(self.rows - 1, -1, -1))
        data = [[mapping.get((r, c)) for c in range(self.cols)] for r in rows]
        return pd.DataFrame(data, index=pd.Index(rows, name="row"), columns=pd.Index(range(self.cols), name="col"), dtype=object)

    def to_arrows(self, policy: Mapping[State, Action]) -> pd.DataFrame:
        chars = {(0, 1): ">", (1, 0): "^", (0, -1): "<", (-1, 0): "v", None: "."}
        return self.show_grid({s: chars[a] for s, a in policy.items()})


def sequential_decision_environment(*, living_reward: float = 0.0, gamma: float = 0.9) -> GridMDP:
    """The 4x3 environment: start bottom-left, +1 top-right, -1 just below it."""
    r = float(living_reward)
    return GridMDP(
        [
            [r, r, r, r],
            [r, None, r, -1.0],
            [r, r, r, +1.0],
        ],
        terminals=[(1, 3), (2, 3)],
        initial=(0, 0),
        gamma=gamma,
    )


def expected_utility(mdp: MarkovDecisionProcess, U: Mapping[State, float], state: State, action: Action) -> float:
    return float(sum(p * U[s1] for p, s1 in mdp.transition_model(state, action)))


def value_iteration(
    mdp: MarkovDecisionProcess,
    *,
    epsilon: float = 0.001,
    max_iterations: int = 20,
    logger: Optional[ExperimentLogger] = None,
) -> Dict[State, float]:
    """Utilities of the MDP's states by Bellman updates.

    Stops once the largest change in a sweep drops below
    epsilon * (1 - gamma) / gamma, or after `max_iterations` sweeps.
    """
    if epsilon <= 0:
        raise ValueError("epsilon must be positive")
    U1: Dict[State, float] = {s: 0.0 for s in mdp.states}
    gamma = mdp.gamma
    threshold = epsilon * (1.0 - gamma) / gamma
    for sweep in range(1, max_iterations + 1):
        U = dict(U1)
        delta = 0.0
        for s in mdp.states:
            best = max(expected_utility(mdp, U, s, a) for a in mdp.actions(s))
            U1[s] = mdp.reward(s) + gamma * best
            delta = max(delta, abs(U1[s] - U[s]))
        converged = delta < threshold
        if logger is not None:
            logger.log("value_iteration.sweep", {"sweep": sweep, "delta": delta, "converged": converged})
        if converged:
            return U
    return U1


def optimal_policy(mdp: MarkovDecisionProcess, U: Mapping[State, float]) -> Dict[State, Action]:
    """Best action per state given utilities U."""
    return {s: argmax(mdp.actions(s), lambda a, s=s: expected_utility(mdp, U, s, a)) for s in mdp.states}


def policy_evaluation(
    pi: Mapping[State, Action],
    U: Dict[State, float],
    mdp: MarkovDecisionProcess,
    *,
    k: int = 20,
) -> Dict[State, float]:
    """k simplified Bellman updates of U under the fixed policy pi (updates U in place)."""
    for _ in range(k):
        for s in mdp.states:
            U[s] = mdp.reward(s) + mdp.gamma * expected_utility(mdp, U, s, pi[s])
    return U


def policy_iteration(
    mdp: MarkovDecisionProcess,
    *,
    k: int = 20,
    rng: np.random.Generator | int | None = None,
    logger: Optional[ExperimentLogger] = None,
) -> Dict[State, Action]:
    """Policy iteration from a random initial policy.

    A state's action only changes on a strict improvement of its expected
    utility, so the loop ends once the policy is stable.
    """
    gen = resolve_rng(rng)
    U: Dict[State, float] = {s: 0.0 for s in mdp.states}
    pi: Dict[State, Action] = {}
    for s in mdp.states:
        acts = mdp.actions(s)
        pi[s] = acts[int(gen.integers(len(acts)))]

    rounds = 0
    while True:
        rounds += 1
        U = policy_evaluation(pi, U, mdp, k=k)
        changed = 0
        for s in mdp.states:
            a = argmax(mdp.actions(s), lambda act, s=s: expected_utility(mdp, U, s, act))
            if a != pi[s] and expected_utility(mdp, U, s, a) > expected_utility(mdp, U, s, pi[s]):
                pi[s] = a
                changed += 1
        if logger is not None:
            logger.log("policy_iteration.round", {"round": rounds, "changed": changed})
        if changed == 0:
            return pi
