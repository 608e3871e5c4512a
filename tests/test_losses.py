import numpy as np
import pytest

from tinynet.losses import MSE, LossFn, LossFnError, OutputSizeMismatchError


def test_mse_of_identical_vectors_is_zero():
    assert MSE().apply([0.1, 0.7, -2.0], [0.1, 0.7, -2.0]) == 0.0


def test_mse_worked_example():
    assert MSE().apply([1.0, 2.0], [0.0, 0.0]) == pytest.approx(2.5)


def test_mse_is_symmetric_and_non_negative():
    a = np.array([0.3, -1.2, 4.0])
    b = np.array([1.0, 0.5, 3.5])
    loss = MSE()
    assert loss.apply(a, b) == pytest.approx(loss.apply(b, a))
    assert loss.apply(a, b) > 0.0


def test_gradient_of_identical_vectors_is_zero():
    gradient = MSE().partial_gradient([0.2, 0.4], [0.2, 0.4])
    assert np.allclose(gradient, 0.0)


def test_gradient_matches_finite_difference():
    loss = MSE()
    output = np.array([0.3, -0.6, 0.9])
    expected = np.array([1.0, 0.0, 0.5])
    gradient = loss.partial_gradient(output, expected)
    h = 1e-6
    for i in range(output.size):
        step = np.zeros_like(output)
        step[i] = h
        numeric = (loss.apply(output + step, expected) - loss.apply(output - step, expected)) / (2 * h)
        assert gradient[i] == pytest.approx(numeric, rel=1e-5, abs=1e-8)


@pytest.mark.parametrize("method", ["apply", "partial_gradient"])
def test_size_mismatch_raises(method):
    with pytest.raises(OutputSizeMismatchError) as info:
        getattr(MSE(), method)([1.0, 2.0, 3.0], [1.0])
    assert info.value.given_output_size == 3
    assert info.value.expected_output_size == 1
    assert isinstance(info.value, LossFnError)


def test_size_mismatch_message():
    with pytest.raises(OutputSizeMismatchError, match=r"given output size \(2\) does not equal expected output size \(1\)"):
        MSE().apply([1.0, 2.0], [1.0])


def test_loss_fn_is_abstract():
    with pytest.raises(TypeError):
        LossFn()