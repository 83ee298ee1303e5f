import pytest

from loss_queue.arrival import ArrivalProcess
from loss_queue.sampling import ExponentialSampler
from loss_queue.uniform import UniformStream


def test_first_point_from_zero_register():
    p = ArrivalProcess(2.0, 0.0)
    assert p.next_point() == pytest.approx(0.777179341165948, rel=1e-12)


def test_arrivals_are_non_decreasing():
    p = ArrivalProcess(3.0, 10.0, sampler=ExponentialSampler(UniformStream(99)))
    last = p.current_point
    for _ in range(500):
        t = p.next_point()
        assert t >= last
        last = t


def test_start_and_rate_use_absolute_values():
    p = ArrivalProcess(-2.0, -5.0)
    assert p.rate == 2.0
    assert p.current_point == 5.0
    assert p.next_point() > 5.0


def test_zero_rate_coerced_to_one(capsys):
    p = ArrivalProcess(0, 0)
    assert p.rate == 1.0
    assert p.next_point() > 0
    assert "zero_rate" in capsys.readouterr().err


def test_deterministic_with_same_register():
    a = ArrivalProcess(2.0, sampler=ExponentialSampler(UniformStream(123)))
    b = ArrivalProcess(2.0, sampler=ExponentialSampler(UniformStream(123)))
    assert [a.next_point() for _ in range(20)] == [b.next_point() for _ in range(20)]
