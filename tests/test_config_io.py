import json

import pytest

from presssim.config import DEFAULT_PARAMS, load_params, params_from_dict, params_to_dict, save_params


class TestParamsFromDict:
    def test_empty_dict_gives_defaults(self) -> None:
        assert params_from_dict({}) == DEFAULT_PARAMS

    def test_partial_override(self) -> None:
        p = params_from_dict({"motor": {"motor_rpm": 1500}, "phases": {"holding": {"time": 2.5}}})
        assert p.motor.motor_rpm == 1500
        assert p.motor.pump_efficiency == DEFAULT_PARAMS.motor.pump_efficiency
        assert p.phases.holding.time == 2.5
        assert p.phases.fast_up == DEFAULT_PARAMS.phases.fast_up

    @pytest.mark.parametrize(
        "data",
        [
            {"pump": {}},
            {"motor": {"rpm": 1500}},
            {"phases": {"pressing": {"time": 1}}},
            {"phases": {"holding": {"speed": 1}}},
            {"cylinder": [25, 60]},
        ],
    )
    def test_rejects_unknown_or_malformed(self, data) -> None:
        with pytest.raises(ValueError):
            params_from_dict(data)


def test_save_load_roundtrip(tmp_path) -> None:
    p = params_from_dict({"cylinder": {"bore": 32.0, "rod": 90.0}})
    path = save_params(p, tmp_path / "cfg" / "press.json")
    assert path.exists()
    assert load_params(path) == p


def test_params_to_dict_layout() -> None:
    d = params_to_dict(DEFAULT_PARAMS)
    assert set(d) == {"motor", "cylinder", "phases"}
    assert d["phases"]["holding"] == {"time": 1.0}


def test_load_rejects_non_object(tmp_path) -> None:
    path = tmp_path / "bad.json"
    path.write_text(json.dumps([1, 2, 3]), encoding="utf-8")
    with pytest.raises(ValueError):
        load_params(path)


@pytest.mark.parametrize(
    "data",
    [
        {"motor": {"pump_efficiency": "0.9"}},
        {"motor": {"motor_rpm": True}},
        {"motor": {"motor_rpm": "1800"}},
        {"cylinder": {"bore": None}},
        {"phases": {"working": {"speed": [3]}}},
        {"phases": {"holding": {"time": "1"}}},
    ],
)
def test_rejects_non_numeric_values(data) -> None:
    with pytest.raises(ValueError):
        params_from_dict(data)


def test_numeric_values_are_normalised() -> None:
    p = params_from_dict({"motor": {"motor_rpm": 1500.0, "system_losses": 5}, "cylinder": {"bore": 30}})
    assert type(p.motor.motor_rpm) is int
    assert type(p.motor.system_losses) is float
    assert type(p.cylinder.bore) is float
