import io

import pytest

from lifesim.ca.grid import ConfigError
from lifesim.ca.render import CLEAR
from lifesim.experiments.config import SimConfig
from lifesim.experiments.sim import run, run_config, LOG_KEYS


def test_frames_and_counter():
    out = io.StringIO()
    log = run(T=4, grid_h=3, grid_w=5, delay=0, seed=0, out=out)
    lines = out.getvalue().splitlines()
    assert len(lines) == 4 * (3 + 1)
    for k in range(4):
        frame = lines[k * 4:(k + 1) * 4]
        assert all(len(r) == 5 and set(r) <= {'#', '.'} for r in frame[:3])
        assert frame[3] == f"generation {k} of 4"
    assert sorted(log) == sorted(LOG_KEYS)
    assert log['t'] == [0, 1, 2, 3]


def test_log_is_consistent():
    log = run(T=30, delay=0, seed=5, quiet=True)
    for k in range(1, 30):
        assert log['population'][k] == log['population'][k - 1] + log['births'][k] - log['deaths'][k]
    assert all(c == b + d for c, b, d in zip(log['changed'], log['births'], log['deaths']))
    assert all(e == (p == 0) for e, p in zip(log['extinct'], log['population']))


def test_same_seed_same_run():
    a = run(T=20, delay=0, seed=9, quiet=True)
    b = run(T=20, delay=0, seed=9, quiet=True)
    assert a == b


def test_pauses_between_frames():
    calls = []
    run(T=3, grid_h=2, grid_w=2, delay=0.25, seed=0, out=io.StringIO(), sleep=calls.append)
    assert calls == [0.25, 0.25, 0.25]


def test_zero_delay_never_sleeps():
    calls = []
    run(T=3, delay=0, seed=0, quiet=True, sleep=calls.append)
    assert calls == []


def test_clear_prefixes_each_frame():
    out = io.StringIO()
    run(T=2, grid_h=2, grid_w=2, delay=0, seed=0, out=out, clear=True)
    assert out.getvalue().count(CLEAR) == 2
    assert out.getvalue().startswith(CLEAR)


def test_no_early_exit_after_extinction():
    log = run(T=10, grid_h=3, grid_w=3, p_alive=0.0, delay=0, quiet=True)
    assert len(log['t']) == 10
    assert all(log['extinct'])


@pytest.mark.parametrize("kw", [dict(grid_h=0), dict(grid_w=-2), dict(T=-1),
                                dict(delay=-1.0), dict(p_alive=2.0)])
def test_invalid_parameters(kw):
    with pytest.raises(ConfigError):
        run(**dict(dict(delay=0, quiet=True), **kw))


def test_config_defaults():
    cfg = SimConfig()
    assert (cfg.grid_h, cfg.grid_w, cfg.generations, cfg.delay) == (10, 20, 300, 1.0)
    assert cfg.p_alive == pytest.approx(1 / 3)
    assert cfg.validate() is cfg


def test_run_config():
    out = io.StringIO()
    log = run_config(SimConfig(grid_h=4, grid_w=6, generations=5, delay=0, seed=3), out=out)
    assert len(log['t']) == 5
    assert out.getvalue().splitlines()[4] == "generation 0 of 5"
