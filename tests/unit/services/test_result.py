import pytest

from workspace_service.libs.result import Error, Return


def test_ok_result():
    result = Return.ok(42)

    assert result.is_ok()
    assert not result.is_err()
    assert result.value == 42
    assert result.error is None


def test_err_result_hides_value():
    result = Return.err(Error("INVITE_EXPIRED", "This invite has expired"))

    assert result.is_err()
    assert result.error.code == "INVITE_EXPIRED"
    assert result.error.details == {}
    with pytest.raises(ValueError):
        result.value
