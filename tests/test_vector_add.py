import numpy as np
import pytest

from imgpool.vector_add import add, main, max_error


def test_add_elementwise():
    result = add([1.0, 2.0], [3.0, 4.0])
    assert result.tolist() == [4.0, 6.0]
    assert result.dtype == np.float32


def test_add_shape_mismatch():
    with pytest.raises(ValueError):
        add([1.0, 2.0], [1.0])


def test_add_ones_and_twos_has_no_error():
    result = add(np.ones(1000), np.full(1000, 2.0))
    assert max_error(result, 3.0) == 0.0


def test_max_error_largest_deviation():
    assert max_error([1.0, 5.0, 2.0], 3.0) == 2.0


def test_max_error_empty():
    assert max_error([], 3.0) == 0.0


def test_main_prints_zero_error(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == "Max error: 0"