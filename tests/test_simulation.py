import pytest

from ball_clock.engine import InvalidBallCount, initialize, step_tick
from ball_clock.simulation import (
    InvalidTimeLimit,
    cycle_complete,
    limit_reached,
    run_cycle,
    run_for,
    run_sim,
    simulate,
)


def test_cycle_complete_only_on_hour_boundaries():
    state = initialize(30)
    assert not cycle_complete(state, 0)
    assert not cycle_complete(state, 59)
    assert cycle_complete(state, 60)

    step_tick(state)
    assert not cycle_complete(state, 120)


def test_limit_reached():
    assert not limit_reached(324, 325)
    assert limit_reached(325, 325)


def test_30_balls_cycle_after_15_days():
    result = run_cycle(30)
    assert result.days == 15
    assert result.minutes_elapsed == 15 * 24 * 60
    assert result.message == "30 balls cycle after 15 days."
    assert result.snapshot is None
    assert result.duration_seconds >= 0.0


def test_45_balls_cycle_after_378_days():
    result = run_cycle(45)
    assert result.days == 378
    assert result.message == "45 balls cycle after 378 days."


def test_run_for_reports_snapshot_json():
    result = run_for(30, 325)
    assert result.minutes_elapsed == 325
    assert result.message == (
        '{"Min":[],"FiveMin":[22,13,25,3,7],"Hour":[6,12,17,4,15],'
        '"Main":[11,5,26,18,2,30,19,8,24,10,29,20,16,21,28,1,23,14,27,9]}'
    )


def test_simulate_selects_mode_by_time_limit():
    assert simulate(30, 0).snapshot is None
    assert simulate(30, 1).snapshot is not None


def test_simulate_is_deterministic():
    a = simulate(33, 5000)
    b = simulate(33, 5000)
    assert a.snapshot == b.snapshot
    assert run_cycle(30).minutes_elapsed == run_cycle(30).minutes_elapsed


def test_simulate_raises_on_invalid_inputs():
    with pytest.raises(InvalidBallCount):
        simulate(26, 10)
    with pytest.raises(InvalidTimeLimit):
        simulate(30, -1)


@pytest.mark.parametrize("ball_count", [-1, 20, 26, 128])
def test_run_sim_rejects_invalid_ball_count(ball_count):
    assert run_sim(ball_count, 0) == (False, "Error - invalid ballCount specified for simulation")


def test_run_sim_rejects_negative_time_limit():
    assert run_sim(30, -5) == (False, "Error - invalid timeLimit specified for simulation")


def test_run_sim_checks_ball_count_before_time_limit():
    assert run_sim(500, -5) == (False, "Error - invalid ballCount specified for simulation")


def test_run_sim_success():
    assert run_sim(30) == (True, "30 balls cycle after 15 days.")
    ok, message = run_sim(30, 325)
    assert ok
    assert message.startswith('{"Min":[],"FiveMin":[22,13,25,3,7]')
