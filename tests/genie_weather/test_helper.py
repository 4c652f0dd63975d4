from genie_weather.helper import (
    clamp,
    temperature_gauge_value,
    thermometer_value,
    pressure_gauge_value,
    pressure_history_value,
)


class TestClamp:
    def test_within_range(self):
        assert clamp(5, 0, 10) == 5

    def test_below_and_above(self):
        assert clamp(-5, 0, 10) == 0
        assert clamp(15, 0, 10) == 10

    def test_swapped_bounds(self):
        assert clamp(15, 10, 0) == 10


class TestTemperatureMapping:
    def test_gauge_maps_domain_onto_0_100(self):
        assert temperature_gauge_value(-10) == 0
        assert temperature_gauge_value(15) == 50
        assert temperature_gauge_value(40) == 100

    def test_gauge_clamps_outside_domain(self):
        assert temperature_gauge_value(-25) == 0
        assert temperature_gauge_value(55) == 100

    def test_thermometer(self):
        for raw in range(-50, 100):
            assert 0 <= thermometer_value(raw) <= 50

        assert thermometer_value(20) == 30


class TestPressureMapping:
    def test_gauge_clamps_to_0_120(self):
        assert pressure_gauge_value(900) == 0
        assert pressure_gauge_value(1000) == 60
        assert pressure_gauge_value(1100) == 120

    def test_history_scaled_to_0_100(self):
        assert pressure_history_value(940) == 0
        assert pressure_history_value(1000) == 50
        assert pressure_history_value(1060) == 100
        assert pressure_history_value(0) == 0
