import json

import pandas as pd

import audit_sampler
import run_mdp_demo


def test_run_mdp_demo_writes_outputs(tmp_path, capsys):
    rc = run_mdp_demo.main(["--outdir", str(tmp_path), "--config", str(tmp_path / "none.yaml"), "--seed", "3", "--epsilon", "0.0001", "--max-iterations", "300"])
    assert rc == 0
    for name in ["utilities.csv", "policy_value_iteration.csv", "policy_policy_iteration.csv", "utilities.png", "experiment_log.jsonl"]:
        assert (tmp_path / name).exists()

    util = pd.read_csv(tmp_path / "utilities.csv", index_col=0)
    assert util.shape == (3, 4)

    events = [json.loads(line)["event"] for line in (tmp_path / "experiment_log.jsonl").read_text(encoding="utf-8").splitlines()]
    assert events[0] == "run.config"
    assert events[-1] == "run.done"
    assert "value_iteration.sweep" in events
    assert "policy_iteration.round" in events

    summary = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert summary["outdir"] == str(tmp_path)


def test_audit_sampler_cli(tmp_path):
    out = tmp_path / "audit.json"
    rc = audit_sampler.main(["--weights", "1,1,0", "--seed", "2", "--draws", "2000", "--config", str(tmp_path / "none.yaml"), "--out", str(out)])
    rep = json.loads(out.read_text(encoding="utf-8"))
    assert rep["zero_weight_hits"] == 0
    assert rep["n"] == 2000
    assert rc == (0 if rep["consistent"] else 1)
