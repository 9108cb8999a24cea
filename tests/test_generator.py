import logging
import math
from dataclasses import replace

import pytest

from presssim.config.models import (
    CyclePhaseParams,
    CyclePhases,
    CylinderParams,
    HoldingPhaseParams,
    MotorSystemParams,
    SimulationParams,
)
from presssim.core.errors import InvalidEfficiency, InvalidGeometry, InvalidPhaseDuration
from presssim.generator import TIME_STEP, CycleSimulator, sample_count, simulate_cycle
from presssim.physics.geometry import resolve_geometry


@pytest.fixture()
def params(default_params: SimulationParams) -> SimulationParams:
    return default_params


@pytest.fixture()
def result(params: SimulationParams):
    return simulate_cycle(params)


class TestTimeGrid:
    def test_sample_count(self, params: SimulationParams, result) -> None:
        total = params.phases.total_cycle_time
        assert len(result) == math.floor(total / 0.1) + 1
        assert len(result) == 91
        assert sample_count(total) == 91

    def test_times_are_exact_multiples_of_step(self, result) -> None:
        for i, p in enumerate(result):
            assert p.time == i * TIME_STEP

    def test_strictly_increasing(self, result) -> None:
        times = [p.time for p in result]
        assert all(b > a for a, b in zip(times, times[1:]))

    @pytest.mark.parametrize("total_parts", [(0.3, 0.3, 0.3, 0.3), (1.05, 2.0, 0.5, 1.25)])
    def test_count_for_non_round_durations(self, total_parts) -> None:
        fd, wk, hd, fu = total_parts
        phases = CyclePhases(
            fast_down=CyclePhaseParams(speed=100.0, stroke=50.0, time=fd),
            working=CyclePhaseParams(speed=2.0, stroke=10.0, time=wk),
            holding=HoldingPhaseParams(time=hd),
            fast_up=CyclePhaseParams(speed=100.0, stroke=60.0, time=fu),
        )
        r = simulate_cycle(SimulationParams(phases=phases))
        assert len(r) == math.floor(phases.total_cycle_time / 0.1) + 1
        assert r.has_run


class TestStrokeProfile:
    def test_starts_at_zero_in_fast_down(self, result) -> None:
        assert result[0].stroke == 0.0
        assert result[0].phase == "fast_down"

    def test_boundary_strokes(self, params: SimulationParams, result) -> None:
        ph = params.phases
        step_fd = ph.fast_down.speed * TIME_STEP
        # fast_down / working
        assert result[20].stroke == pytest.approx(ph.fast_down.stroke, abs=step_fd)
        # working / holding
        assert result[60].stroke == pytest.approx(ph.fast_down.stroke + ph.working.stroke)

    def test_linear_interpolation(self, result) -> None:
        assert result[10].stroke == pytest.approx(150.0)
        assert result[40].stroke == pytest.approx(350.0)
        assert result[80].stroke == pytest.approx(200.0)

    def test_holding_keeps_stroke(self, result) -> None:
        held = [p.stroke for p in result if p.phase == "holding"]
        assert held and all(s == pytest.approx(400.0) for s in held)

    def test_cycle_end(self, params: SimulationParams, result) -> None:
        ph = params.phases
        expected = ph.fast_down.stroke + ph.working.stroke - ph.fast_up.stroke
        assert result[-1].stroke == pytest.approx(max(0.0, expected), abs=1e-9)

    def test_stroke_never_negative(self) -> None:
        phases = replace(CyclePhases(), fast_up=CyclePhaseParams(speed=300.0, stroke=600.0, time=2.0))
        r = simulate_cycle(SimulationParams(phases=phases))
        assert min(p.stroke for p in r) >= 0.0


class TestPhaseQuantities:
    def test_piecewise_constant_by_phase(self, result) -> None:
        by_phase = {}
        for p in result:
            by_phase.setdefault(p.phase, set()).add((p.speed, p.flow, p.pressure))
        assert set(by_phase) == {"fast_down", "working", "holding", "fast_up"}
        assert all(len(v) == 1 for v in by_phase.values())

    def test_holding_speed_and_flow_are_zero(self, result) -> None:
        holding = [p for p in result if p.phase == "holding"]
        assert holding
        assert all(p.speed == 0.0 and p.flow == 0.0 for p in holding)
        assert all(p.hydraulic_power == 0.0 and p.motor_power == 0.0 for p in holding)

    def test_fast_up_speed_is_magnitude_and_uses_return_area(self, params: SimulationParams, result) -> None:
        f = resolve_geometry(params.cylinder)
        p = result[80]
        assert p.phase == "fast_up"
        assert p.speed == 200.0
        assert p.flow == pytest.approx(f.area_return_m2 * 0.2 * 60.0 * 1000.0)
        assert p.pressure == pytest.approx(f.p_up_bar + 10.0)

    def test_power_relations(self, params: SimulationParams, result) -> None:
        eff = params.motor.pump_efficiency
        losses = params.motor.system_losses
        for p in result:
            base = p.pressure - losses
            assert p.hydraulic_power == pytest.approx(p.pressure * p.flow / 600.0)
            assert p.motor_power == pytest.approx(p.hydraulic_power / eff)
            assert p.ideal_motor_power == pytest.approx(base * p.flow / 600.0)

    def test_swashplate_in_range(self, result) -> None:
        assert all(0.0 <= p.swashplate_angle <= 90.0 for p in result)

    def test_fast_down_saturates_pump(self, result) -> None:
        assert result[5].swashplate_angle == pytest.approx(90.0)

    def test_saturation_is_logged_not_raised(self, params: SimulationParams, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="presssim.generator"):
            simulate_cycle(params)
        assert any("saturated" in r.getMessage() for r in caplog.records)


class TestWorkedExample:
    def test_first_working_sample(self, params: SimulationParams, result) -> None:
        f = resolve_geometry(params.cylinder)
        p = result[20]
        assert p.time == pytest.approx(2.0)
        assert p.phase == "working"
        assert result[19].phase == "fast_down"
        assert p.speed == 3.0
        assert p.pressure == pytest.approx(f.p_hold_bar + 10.0)

    def test_fast_down_sample(self, params: SimulationParams, result) -> None:
        f = resolve_geometry(params.cylinder)
        p = result[1]
        assert p.speed == 200.0
        assert p.flow == pytest.approx(f.area_piston_m2 * 0.2 * 60000.0)
        assert p.pressure == pytest.approx(f.p_dead_bar + 10.0)


class TestPurity:
    def test_idempotent(self, params: SimulationParams) -> None:
        assert simulate_cycle(params) == simulate_cycle(params)

    def test_simulator_reusable(self, params: SimulationParams) -> None:
        sim = CycleSimulator(params)
        assert sim.run() == sim.run()


class TestFailFast:
    def test_invalid_geometry(self, params: SimulationParams) -> None:
        bad = replace(params, cylinder=CylinderParams(bore=25.0, rod=250.0))
        with pytest.raises(InvalidGeometry):
            simulate_cycle(bad)

    @pytest.mark.parametrize("eff", [0.0, -0.5, 1.5])
    def test_invalid_efficiency(self, params: SimulationParams, eff: float) -> None:
        bad = replace(params, motor=MotorSystemParams(pump_efficiency=eff))
        with pytest.raises(InvalidEfficiency):
            simulate_cycle(bad)

    def test_invalid_phase_duration(self, params: SimulationParams) -> None:
        bad = replace(params, phases=replace(params.phases, fast_up=CyclePhaseParams(speed=200.0, stroke=400.0, time=0.0)))
        with pytest.raises(InvalidPhaseDuration):
            simulate_cycle(bad)
