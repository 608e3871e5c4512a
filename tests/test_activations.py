import numpy as np
import pytest

from tinynet.activations import ActivationFn, Sigmoid


def test_sigmoid_at_zero_is_half():
    assert Sigmoid().apply(0.0) == pytest.approx(0.5)


def test_sigmoid_derivative_at_zero():
    sigmoid = Sigmoid()
    assert sigmoid.derivative(0.0, sigmoid.apply(0.0)) == pytest.approx(0.25)


@pytest.mark.parametrize("x", [-5.0, -1.0, 0.3, 2.0, 7.5])
def test_sigmoid_is_symmetric(x):
    sigmoid = Sigmoid()
    assert sigmoid.apply(x) + sigmoid.apply(-x) == pytest.approx(1.0)


def test_sigmoid_stays_in_open_unit_interval_and_increases():
    xs = np.linspace(-10.0, 10.0, 41)
    ys = Sigmoid().apply(xs)
    assert ys.shape == (41,)
    assert float(ys.min()) > 0.0
    assert float(ys.max()) < 1.0
    assert float(np.diff(ys).min()) > 0.0
    assert float(ys[20]) == pytest.approx(0.5)


@pytest.mark.parametrize("x", [-3.0, -0.5, 0.0, 0.8, 4.0])
def test_sigmoid_derivative_matches_finite_difference(x):
    sigmoid = Sigmoid()
    h = 1e-6
    numeric = (sigmoid.apply(x + h) - sigmoid.apply(x - h)) / (2 * h)
    assert sigmoid.derivative(x, sigmoid.apply(x)) == pytest.approx(numeric, rel=1e-5)


def test_sigmoid_works_element_wise_on_arrays():
    sigmoid = Sigmoid()
    xs = np.array([-1.0, 0.0, 2.0])
    ys = sigmoid.apply(xs)
    assert ys.shape == xs.shape
    assert [sigmoid.apply(float(x)) for x in xs] == pytest.approx(list(ys))


def test_activation_fn_is_abstract():
    with pytest.raises(TypeError):
        ActivationFn()