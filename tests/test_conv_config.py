import pytest

from conv_config import ConvolutionConfiguration


def test_ring_mult_cyclic_and_negacyclic():
    config = ConvolutionConfiguration(4)
    assert config.ring_mult([1, 2, 3, 4], [5, 6, 7, 8]).tolist() == [66, 68, 66, 60]
    assert config.ring_mult([1, 2, 3, 4], [5, 6, 7, 8], negacyclic=True).tolist() == [-56, -36, 2, 60]


def test_polynomial_mult_then_reduce():
    config = ConvolutionConfiguration(4)
    full = config.polynomial_mult([1, 2, 3, 4], [5, 6, 7, 8])
    assert full.tolist() == [5, 16, 34, 60, 61, 52, 32]
    assert config.reduce(full).tolist() == [66, 68, 66, 60]
    assert config.reduce(full, negacyclic=True).tolist() == [-56, -36, 2, 60]


def test_validation():
    config = ConvolutionConfiguration(3)
    assert config.is_sequence_valid([1, 2, 3])
    assert not config.is_sequence_valid([1, 2])
    with pytest.raises(ValueError):
        config.validate_pair([1, 2, 3], [1, 2, 3, 4])
    with pytest.raises(ValueError):
        config.ring_mult([1, 2], [1, 2])
    with pytest.raises(TypeError):
        config.validate_sequence([0.1, 0.2, 0.3])


def test_bad_dimension():
    with pytest.raises(ValueError):
        ConvolutionConfiguration(0)


def test_overflow_setting_is_forwarded():
    config = ConvolutionConfiguration(2, check_overflow=True)
    with pytest.raises(OverflowError):
        config.ring_mult([2**62, 1], [8, 1])
    with pytest.raises(OverflowError):
        config.polynomial_mult([2**62], [8])


def test_print_summary(capsys):
    ConvolutionConfiguration(8, check_overflow=True).print_summary()
    out = capsys.readouterr().out
    assert "ring dimension n = 8" in out
    assert "overflow check: on" in out
