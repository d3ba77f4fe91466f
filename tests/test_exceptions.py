import pytest

from py_vec3 import ConfigValueError, Vec3f, VectorIndexError


def test_vector_index_error_message_and_attrs():
    err = VectorIndexError(5)
    assert err.index == 5
    assert isinstance(err, IndexError)
    assert "5" in str(err)


def test_vector_index_error_raised_with_index():
    with pytest.raises(VectorIndexError) as exc_info:
        Vec3f(1, 2, 3).set_value(-1, 0)
    assert exc_info.value.index == -1


def test_config_value_error_message_variants():
    e1 = ConfigValueError('degenerate_log_level', 'LOUD')
    assert "'LOUD'" in str(e1) and "degenerate_log_level" in str(e1)
    assert e1.key == 'degenerate_log_level' and e1.value == 'LOUD'

    e2 = ConfigValueError('degenerate_log_level', 'LOUD', note="Expected one of ('DEBUG',)")
    assert str(e2).endswith("Expected one of ('DEBUG',)")
