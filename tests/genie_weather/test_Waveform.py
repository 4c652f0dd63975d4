"""Tests for the synthetic sample sources."""
import unittest

from genie_weather import SampleSource, SineWaveform


class TestSineWaveform(unittest.TestCase):
    def test_implements_protocol(self):
        assert isinstance(SineWaveform.temperature(), SampleSource)

    def test_temperature_range(self):
        """Test the temperature waveform peaks at 40 and bottoms out at -10."""
        self.assertEqual(SineWaveform(25.0, -10.0, phase=0).peek(), 15)
        self.assertEqual(SineWaveform(25.0, -10.0, phase=90).peek(), 40)
        self.assertEqual(SineWaveform(25.0, -10.0, phase=270).peek(), -10)

    def test_pressure_range(self):
        self.assertEqual(SineWaveform(60.0, 940.0, phase=0).peek(), 1000)
        self.assertEqual(SineWaveform(60.0, 940.0, phase=90).peek(), 1060)
        self.assertEqual(SineWaveform(60.0, 940.0, phase=270).peek(), 940)

    def test_next_sample_advances_one_degree(self):
        waveform = SineWaveform.temperature()

        first = waveform.next_sample()

        self.assertEqual(first, 15)
        self.assertEqual(waveform.phase, 1.0)

    def test_phase_wraps_at_360(self):
        waveform = SineWaveform.pressure()
        for _ in range(360):
            waveform.next_sample()

        self.assertEqual(waveform.phase, 0.0)

    def test_samples_stay_in_range(self):
        waveform = SineWaveform.temperature()
        samples = [waveform.next_sample() for _ in range(720)]

        self.assertEqual(min(samples), -10)
        self.assertEqual(max(samples), 40)

    def test_is_deterministic(self):
        a = SineWaveform.pressure()
        b = SineWaveform.pressure()

        self.assertEqual(
            [a.next_sample() for _ in range(50)],
            [b.next_sample() for _ in range(50)]
        )


if __name__ == '__main__':
    unittest.main()
