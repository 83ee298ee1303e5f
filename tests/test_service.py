from loss_queue.sampling import ExponentialSampler
from loss_queue.service import ServiceDevice
from loss_queue.uniform import UniformStream


def test_idle_device_admits_and_moves_release_time():
    d = ServiceDevice(5.0)
    assert d.release_moment() == 0.0
    assert d.proceed_request(1.0) is True
    assert d.release_moment() > 1.0


def test_busy_device_loses_request_without_state_change():
    d = ServiceDevice(5.0)
    d.proceed_request(1.0)
    release = d.release_moment()
    assert d.is_busy(release - 1e-9)
    assert d.proceed_request(release - 1e-9) is False
    assert d.release_moment() == release


def test_request_at_release_instant_is_admitted():
    d = ServiceDevice(5.0, sampler=ExponentialSampler(UniformStream(3)))
    d.proceed_request(0.0)
    release = d.release_moment()
    assert d.proceed_request(release) is True
    assert d.release_moment() > release


def test_service_starts_at_arrival_not_at_previous_release():
    d = ServiceDevice(5.0)
    d.proceed_request(0.0)
    assert d.proceed_request(50.0) is True
    assert d.release_moment() > 50.0


def test_zero_mu_coerced_to_one(capsys):
    d = ServiceDevice(0)
    assert d.rate == 1.0
    assert "zero_rate" in capsys.readouterr().err
