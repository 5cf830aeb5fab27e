import pytest

from layout import Node
from proximity import CircleField, hit_active_node, render_state, render_states

W, H = 400, 400   # center (200, 200)


def test_node_at_center_is_active(params):
    st = render_state(Node((200, 200), "A"), (0, 0), W, H, params)
    assert st.active
    assert st.size == params.large_size


def test_rim_is_active_just_outside_is_not(params):
    rim = render_state(Node((300, 200), "A"), (0, 0), W, H, params)
    out = render_state(Node((300 + 1e-6, 200), "B"), (0, 0), W, H, params)
    assert rim.active and rim.size == 60
    assert not out.active and out.size == 30


def test_pan_offset_moves_nodes_into_focus(params):
    node = Node((20, 200), "C")
    assert not render_state(node, (0, 0), W, H, params).active
    st = render_state(node, (150, 10), W, H, params)
    assert st.position == (170, 210)
    assert st.active


def test_hit_only_active_nodes(params):
    states = render_states(
        [Node((200, 200), "A"), Node((20, 20), "B")], (0, 0), W, H, params
    )
    assert hit_active_node(states, (210, 215)).node.letter == "A"
    assert hit_active_node(states, (20, 20)) is None       # small, not tappable
    assert hit_active_node(states, (200, 240)) is None     # outside 30 px


def test_topmost_node_wins(params):
    under = Node((200, 200), "U")
    over = Node((210, 200), "O")
    states = render_states([under, over], (0, 0), W, H, params)
    assert hit_active_node(states, (205, 200)).node is over


@pytest.fixture()
def field(params):
    f = CircleField(params)
    f.nodes = [Node((180, 200), "A"), Node((230, 200), "B"), Node((20, 20), "Z")]
    return f


def test_tap_opens_popup_and_replaces_selection(field):
    assert field.popup_node() is None

    assert field.tap((180, 200), W, H)
    assert field.popup_node().letter == "A"

    assert field.tap((230, 200), W, H)
    assert field.show_popup
    assert field.popup_node().letter == "B"


def test_tap_on_inactive_or_empty_keeps_state(field):
    field.tap((180, 200), W, H)
    assert not field.tap((20, 20), W, H)
    assert not field.tap((390, 390), W, H)
    assert field.popup_node().letter == "A"


def test_close_keeps_last_selection(field):
    field.tap((230, 200), W, H)
    field.close_popup()
    assert field.popup_node() is None
    assert field.selected.letter == "B"


def test_panning_changes_what_is_tappable(field):
    field.drag_changed((180, 180))
    assert field.tap((200, 200), W, H)
    assert field.popup_node().letter == "Z"
    field.drag_ended((180, 180))
    assert field.pan.offset == (180.0, 180.0)


def test_setup_lays_out_once(params):
    f = CircleField(params)
    assert not f.ready
    f.setup(800, 600)
    first = list(f.nodes)
    assert len(first) == params.node_count
    f.setup(1200, 900)
    assert f.nodes == first
