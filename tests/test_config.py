from pathlib import Path

import numpy as np
import pytest

from frontierkit.config import ToolkitConfig, load_config
from frontierkit.logger import ExperimentLogger
from frontierkit.ordering import Ordering
from frontierkit.randomization import RandomizationEngine, resolve_rng


def test_defaults_when_file_missing(tmp_path):
    cfg = load_config(tmp_path / "absent.yaml")
    assert cfg == ToolkitConfig()
    assert cfg.order is Ordering.ASCENDING
    assert load_config(None).to_dict()["gamma"] == 0.9


def test_yaml_values_and_overrides(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("ordering: descending\nseed: 5\ngamma: 0.8\nmax_iterations: 50\n", encoding="utf-8")
    cfg = load_config(p, max_iterations=None, epsilon=0.01)
    assert cfg.order is Ordering.DESCENDING
    assert cfg.seed == 5
    assert cfg.gamma == 0.8
    assert cfg.max_iterations == 50
    assert cfg.epsilon == 0.01


@pytest.mark.parametrize(
    "text",
    [
        "gamma: 1.5\n",
        "ordering: sideways\n",
        "epsilon: 0\n",
        "audit_alpha: 1.0\n",
        "unknown_key: 1\n",
        "- a\n- b\n",
    ],
)
def test_invalid_config_rejected(tmp_path, text):
    p = tmp_path / "bad.yaml"
    p.write_text(text, encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)


def test_repo_default_config_is_valid():
    repo_root = Path(__file__).resolve().parents[1]
    cfg = load_config(repo_root / "configs" / "default.yaml")
    assert cfg.seed == 7


def test_logger_appends_jsonl(tmp_path):
    logger = ExperimentLogger(tmp_path / "logs")
    logger.log("a", {"x": 1})
    logger.log("b", {"path": tmp_path})
    events = logger.read()
    assert [e["event"] for e in events] == ["a", "b"]
    assert events[0]["payload"] == {"x": 1}
    assert events[0]["ts_utc"].endswith("Z")
    assert len(logger.path.read_text(encoding="utf-8").splitlines()) == 2


def test_resolve_rng():
    g = np.random.default_rng(1)
    assert resolve_rng(g) is g
    assert resolve_rng(4).random() == np.random.default_rng(4).random()
    assert isinstance(resolve_rng(None), np.random.Generator)
    with pytest.raises(TypeError):
        resolve_rng("seed")
    with pytest.raises(TypeError):
        resolve_rng(True)


def test_randomization_engine_is_reproducible():
    a = RandomizationEngine(master_seed=99)
    b = RandomizationEngine(master_seed=99)
    assert a.seeds(5) == b.seeds(5)
    ga, gb = a.generator(), b.generator()
    assert ga.random() == gb.random()
    first, second = a.generators(2)
    assert first.random() != second.random()
