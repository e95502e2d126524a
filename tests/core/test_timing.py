"""
Tests for Timer.
"""

import pytest

from densematrix.core.compute.timing import Timer


class TestTimer:

    def test_result_has_total_and_sections(self):
        timer = Timer()
        timer.start()
        with timer.section('elimination'):
            sum(range(1000))
        timer.stop()
        result = timer.result()
        assert set(result) == {'total_seconds', 'elimination'}
        assert result['total_seconds'] >= 0.0
        assert result['elimination'] >= 0.0

    def test_sections_accumulate(self):
        timer = Timer()
        timer.start()
        with timer.section('step'):
            pass
        first = timer._sections['step']
        with timer.section('step'):
            sum(range(1000))
        timer.stop()
        assert timer.result()['step'] >= first

    def test_section_recorded_on_exception(self):
        timer = Timer()
        timer.start()
        with pytest.raises(ZeroDivisionError):
            with timer.section('boom'):
                1 / 0
        timer.stop()
        assert 'boom' in timer.result()

    def test_stop_before_start(self):
        with pytest.raises(RuntimeError, match="before start"):
            Timer().stop()

    def test_result_before_stop(self):
        timer = Timer()
        timer.start()
        with pytest.raises(RuntimeError, match="before stop"):
            timer.result()
