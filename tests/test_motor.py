import pytest

from cylinview.motor import BRAKE_DUTY, IN1, IN2, Motor


@pytest.fixture
def recorded():
    calls = []
    motor = Motor(lambda pin, duty: calls.append((pin, duty)))
    return motor, calls


def test_forward_power_goes_to_first_input(recorded):
    motor, calls = recorded
    motor.set_power(80)
    assert calls == [(IN1, 80), (IN2, 0)]


def test_reverse_power_goes_to_second_input(recorded):
    motor, calls = recorded
    motor.set_power(-80)
    assert calls == [(IN1, 0), (IN2, 80)]


def test_zero_power_coasts(recorded):
    motor, calls = recorded
    motor.set_power(0)
    assert calls == [(IN1, 0), (IN2, 0)]


def test_slow_decay_changes_idle_input(recorded):
    motor, calls = recorded
    motor.set_decay_mode(True)
    motor.set_power(50)
    motor.set_power(-50)
    motor.set_power(0)
    assert calls == [
        (IN1, 50), (IN2, 1),
        (IN1, 1), (IN2, 50),
        (IN1, 1), (IN2, 1),
    ]


def test_fast_decay_restores_zero(recorded):
    motor, calls = recorded
    motor.set_decay_mode(True)
    motor.set_decay_mode(False)
    motor.set_power(30)
    assert calls == [(IN1, 30), (IN2, 0)]


def test_brake_drives_both_inputs_high(recorded):
    motor, calls = recorded
    motor.set_brake(True)
    assert calls == [(IN1, BRAKE_DUTY), (IN2, BRAKE_DUTY)]
    assert BRAKE_DUTY == 255


def test_brake_release(recorded):
    motor, calls = recorded
    motor.set_brake(False)
    assert calls == [(IN1, 0), (IN2, 0)]