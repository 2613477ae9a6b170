import pytest

from xornets.perceptron import EPOCHS, Perceptron, XOR_INPUTS, XOR_LABELS, main

AND_LABELS = (0, 0, 0, 1)
OR_LABELS = (0, 1, 1, 1)


def _answers(neuron):
    return [int(neuron.output(i1, i2)) for i1, i2 in XOR_INPUTS]


def test_untrained_neuron_never_fires():
    neuron = Perceptron()
    assert _answers(neuron) == [0, 0, 0, 0]


@pytest.mark.parametrize("labels", [AND_LABELS, OR_LABELS])
def test_learns_linearly_separable_functions(labels):
    neuron = Perceptron()
    neuron.train(XOR_INPUTS, labels)
    assert _answers(neuron) == list(labels)


def test_cannot_learn_xor():
    neuron = Perceptron()
    history = neuron.train(XOR_INPUTS, XOR_LABELS)
    assert len(history) == EPOCHS
    answers = _answers(neuron)
    assert all(a in (0, 1) for a in answers)
    correct = sum(a == label for a, label in zip(answers, XOR_LABELS))
    # XOR is not linearly separable, so a single neuron gets at least one wrong.
    assert correct <= 3


def test_history_has_one_entry_per_epoch_and_ends_at_final_weights():
    neuron = Perceptron()
    history = neuron.train(XOR_INPUTS, XOR_LABELS, epochs=7)
    assert [h.epoch for h in history] == list(range(1, 8))
    last = history[-1]
    assert (last.bias, last.w1, last.w2) == (neuron.bias, neuron.w1, neuron.w2)


def test_zero_epochs_leaves_weights_alone():
    neuron = Perceptron(bias=0.3, w1=-0.2, w2=0.1)
    assert neuron.train(XOR_INPUTS, XOR_LABELS, epochs=0) == []
    assert (neuron.bias, neuron.w1, neuron.w2) == (0.3, -0.2, 0.1)


def test_converged_training_stops_changing_weights():
    neuron = Perceptron()
    history = neuron.train(XOR_INPUTS, AND_LABELS, epochs=50)
    assert history[-1] == history[-2].__class__(50, *(
        history[-2].bias, history[-2].w1, history[-2].w2))


def test_mismatched_lengths_raise():
    with pytest.raises(ValueError):
        Perceptron().train(XOR_INPUTS, (0, 1))


def test_negative_epochs_raise():
    with pytest.raises(ValueError):
        Perceptron().train(XOR_INPUTS, XOR_LABELS, epochs=-1)


def test_main_prints_every_epoch_and_answers(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == EPOCHS * 5 + 4
    assert lines[0] == "Weights after epoch 1"
    assert f"Weights after epoch {EPOCHS}" in lines
    assert lines[-4].startswith("Input: (0, 0) -> Output: ")
    assert lines[-1].startswith("Input: (1, 1) -> Output: ")