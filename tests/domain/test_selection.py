from waypick.domain.selection import Selection, SelectionPhase


def test_transitions_empty_one_two():
    sel = Selection()
    assert sel.phase is SelectionPhase.EMPTY
    assert sel.departure is None and sel.arrival is None

    assert sel.select("Point_2")
    assert sel.phase is SelectionPhase.ONE_SELECTED
    assert sel.departure == "Point_2"
    assert not sel.complete

    assert sel.select("Point_1")
    assert sel.phase is SelectionPhase.TWO_SELECTED
    assert sel.ids == ("Point_2", "Point_1")
    assert sel.arrival == "Point_1"
    assert sel.complete


def test_two_selected_ignores_further_selects():
    sel = Selection()
    sel.select("a")
    sel.select("b")
    assert not sel.select("c")
    assert sel.ids == ("a", "b")
    assert len(sel) == 2


def test_same_point_twice_is_rejected():
    sel = Selection()
    sel.select("a")
    assert not sel.select("a")
    assert sel.phase is SelectionPhase.ONE_SELECTED
    assert sel.ids == ("a",)


def test_clear_returns_to_empty():
    sel = Selection()
    assert not sel.clear()
    sel.select("a")
    sel.select("b")
    assert sel.clear()
    assert sel.phase is SelectionPhase.EMPTY
    assert "a" not in sel
    assert sel.select("b")
    assert sel.departure == "b"
