from studentreg.core.table_view import build_form_state, build_rows, build_table, needs_scrollbar
from studentreg.core.validation import clean_fields

from conftest import JANE, JOHN


def test_empty_table():
    table = build_table([])
    assert table.rows == []
    assert table.is_empty
    assert table.max_height == 400
    assert not table.scrollable


def test_rows_carry_index_and_actions():
    rows = build_rows([clean_fields(JANE), clean_fields(JOHN)])
    assert [r.index for r in rows] == [0, 1]
    assert rows[1].student_id == "102"
    assert rows[0].actions == ["edit", "delete"]


def test_needs_scrollbar_threshold():
    assert not needs_scrollbar(None)
    assert not needs_scrollbar(400)
    assert needs_scrollbar(401)
    assert needs_scrollbar(150, max_height=100)


def test_build_table_scrollable():
    table = build_table([clean_fields(JANE)], content_height=900)
    assert not table.is_empty
    assert table.scrollable


def test_form_state_modes(store):
    store.submit(JANE)
    form = build_form_state(store)
    assert (form.mode, form.submit_label, form.show_cancel) == ("add", "Add", False)
    store.start_edit(0)
    form = build_form_state(store)
    assert form.mode == "edit"
    assert form.submit_label == "Update"
    assert form.show_cancel
    assert form.edit_index == 0
    assert form.values == JANE
