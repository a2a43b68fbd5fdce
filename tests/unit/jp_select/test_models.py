import pytest

from jp_select.models import Option, SelectionState, SelectMode

pytestmark = pytest.mark.unit_select


def test_option_equality_ignores_raw_record() -> None:
    a = Option(id="1", label="Alice", raw={"_id": "1", "role": "editor"})
    b = Option(id="1", label="Alice", raw=None)
    assert a == b


def test_single_mode_state_rejects_two_selections() -> None:
    with pytest.raises(ValueError):
        SelectionState(
            mode=SelectMode.SINGLE,
            selected=[Option(id="1", label="A"), Option(id="2", label="B")],
        )


def test_selection_state_helpers() -> None:
    state = SelectionState(
        mode=SelectMode.MULTIPLE,
        selected=[Option(id="1", label="A"), Option(id="2", label="B")],
    )
    assert state.selected_ids() == ["1", "2"]
    assert state.has("2")
    assert not state.has("3")
    assert state.open is False
