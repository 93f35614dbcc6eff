import pytest

from motoparts.states.root_state import RootState


@pytest.fixture
def root_state():
    state = RootState(_reflex_internal_init=True)
    state._clean()
    return state


def _changes(state) -> dict:
    delta = state.get_delta().get(state.get_full_name(), {})
    return {name.removesuffix("_rx_state_"): value for name, value in delta.items()}


def test_admin_sign_in_updates_role_vars(root_state, admin_user):
    root_state._apply_user(admin_user)

    changes = _changes(root_state)

    assert changes["is_admin"] is True
    assert changes["role_label"] == "Admin"
    routes = [item["route"] for item in changes["navigation_items"]]
    assert "/expenses" in routes
    assert "/users" in routes


def test_sign_out_hides_admin_links_again(root_state, admin_user):
    root_state._apply_user(admin_user)
    root_state.get_delta()
    root_state._clean()

    root_state._clear_session()

    changes = _changes(root_state)
    assert changes["is_admin"] is False
    assert changes["role_label"] == "User"
    assert "/users" not in [item["route"] for item in changes["navigation_items"]]
