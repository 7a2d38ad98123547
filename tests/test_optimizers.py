import numpy as np
import pytest

from convective.ml.backend import ShapeError
from convective.ml.loss import CrossEntropy
from convective.ml.models import LinearModel
from convective.ml.optimizers import GradientDescent


def test_missing_id_raises():
    with pytest.raises(ValueError, match="Missing id"):
        GradientDescent(None, 0.1)


def test_missing_learning_rate_raises():
    with pytest.raises(ValueError, match="Missing learning_rate"):
        GradientDescent("sgd_00", None)


def test_fields_are_kept():
    opt = GradientDescent("sgd_00", 0.05)
    assert opt.id == "sgd_00"
    assert opt.learning_rate == 0.05


def test_zero_learning_rate_leaves_parameters_unchanged():
    weights = np.array([[0.5], [-1.0]])
    bias = np.array([[0.2]])
    opt = GradientDescent("sgd", 0.0)
    opt.step(weights, bias, np.array([[3.0], [4.0]]), np.array([[1.0]]))
    np.testing.assert_array_equal(weights, [[0.5], [-1.0]])
    np.testing.assert_array_equal(bias, [[0.2]])


def test_unit_step_with_own_values_reaches_zero():
    weights = np.array([[0.5], [-1.0], [2.0]])
    bias = np.array([[0.2]])
    opt = GradientDescent("sgd", 1.0)
    opt.step(weights, bias, weights.copy(), bias.copy())
    np.testing.assert_allclose(weights, np.zeros((3, 1)))
    np.testing.assert_allclose(bias, np.zeros((1, 1)))


def test_opposite_steps_cancel():
    weights = np.array([[0.5], [-1.0]])
    bias = np.array([[0.2]])
    grad_w = np.array([[0.3], [0.7]])
    grad_b = np.array([[-0.4]])
    opt = GradientDescent("sgd", 0.25)
    opt.step(weights, bias, grad_w, grad_b)
    assert not np.allclose(weights, [[0.5], [-1.0]])
    opt.step(weights, bias, -grad_w, -grad_b)
    np.testing.assert_allclose(weights, [[0.5], [-1.0]])
    np.testing.assert_allclose(bias, [[0.2]])


def test_step_moves_against_gradient():
    weights = np.zeros((2, 1))
    bias = np.zeros((1, 1))
    opt = GradientDescent("sgd", 0.1)
    opt.step(weights, bias, np.array([[1.0], [-1.0]]), np.array([[2.0]]))
    assert weights[0, 0] < 0.0 < weights[1, 0]
    assert bias[0, 0] < 0.0


def test_shape_mismatch_raises():
    opt = GradientDescent("sgd", 0.1)
    with pytest.raises(ShapeError):
        opt.step(np.zeros((2, 1)), np.zeros((1, 1)), np.zeros((3, 1)), np.zeros((1, 1)))


def test_training_reduces_loss():
    rng = np.random.default_rng(3)
    features = rng.uniform(-2.0, 2.0, size=(100, 3))
    targets = (features @ np.array([[1.0], [-0.5], [0.8]]) > 0).astype(np.float64)
    model = LinearModel.glorot_uniform_init(3, id="model_00", rng=rng)
    loss = CrossEntropy("bce_00")
    opt = GradientDescent("sgd_00", 0.5)

    def current_loss():
        logits = model.forward(features)
        return loss.loss_and_gradients(
            features, logits, targets, model.weights, model.bias
        )

    first = current_loss().loss_value
    for _ in range(100):
        out = current_loss()
        opt.step(model.weights, model.bias, out.weight_grad, out.bias_grad)
    assert current_loss().loss_value < first