"""Tests for the bounded note store."""

from pocketnotes_app.buffers import MAX_NOTES, TITLE_CAPACITY
from pocketnotes_app.notes import NO_SELECTION, NoteStore


def _store_with(store, *titles):
    for title in titles:
        assert store.create_note(title) is not None
    return store


class TestCreateNote:
    def test_first_note(self, store, notes_dir):
        assert store.create_note("todo") == 0
        assert store.count == 1
        assert store.titles() == ["todo"]
        assert store.selected_note().content == ""
        assert store.selected == 0
        assert (notes_dir / "todo").read_bytes() == b""

    def test_empty_title_rejected(self, store):
        assert store.create_note("") is None
        assert store.count == 0

    def test_capacity_is_enforced(self, store):
        for i in range(MAX_NOTES):
            assert store.create_note(f"note{i}") == i
        assert store.is_full
        assert store.create_note("one too many") is None
        assert store.count == MAX_NOTES
        assert store.selected == MAX_NOTES - 1

    def test_title_is_truncated(self, store, notes_dir):
        store.create_note("t" * 50)
        title = "t" * (TITLE_CAPACITY - 1)
        assert store.titles() == [title]
        assert (notes_dir / title).exists()

    def test_unsafe_title_rejected(self, store, tmp_path):
        assert store.create_note("../escape") is None
        assert store.count == 0
        assert not (tmp_path / "escape").exists()

    def test_duplicate_titles_share_one_file(self, store, notes_dir):
        _store_with(store, "todo", "todo")
        assert store.titles() == ["todo", "todo"]
        assert sorted(p.name for p in notes_dir.iterdir()) == ["todo"]


class TestSelection:
    def test_select_valid_index(self, store):
        _store_with(store, "a", "b")
        assert store.select_note(0)
        assert store.selected_note().title == "a"

    def test_select_invalid_index_is_noop(self, store):
        _store_with(store, "a")
        assert not store.select_note(3)
        assert not store.select_note(-1)
        assert store.selected == 0

    def test_wraparound(self, store):
        _store_with(store, "a", "b", "c")
        store.select_note(0)
        assert store.previous_note() == 2
        assert store.next_note() == 0
        assert store.next_note() == 1

    def test_navigation_on_empty_store_is_noop(self, store):
        assert store.next_note() is None
        assert store.previous_note() is None
        assert store.selected == NO_SELECTION
        assert store.selected_note() is None


class TestAppendToSelected:
    def test_appends_and_persists(self, store, notes_dir):
        store.create_note("todo")
        assert store.append_to_selected("buy milk")
        assert store.append_to_selected("call mom")
        assert store.selected_note().content == "buy milk\ncall mom"
        assert (notes_dir / "todo").read_bytes() == b"buy milk\ncall mom"

    def test_full_note_is_left_unchanged(self, store, notes_dir):
        store.create_note("todo")
        store.selected_note().content = "a" * 1020
        assert not store.append_to_selected("xyz")
        assert store.selected_note().content == "a" * 1020
        assert (notes_dir / "todo").read_bytes() == b"a" * 1020

    def test_without_selection_does_nothing(self, store):
        assert not store.append_to_selected("text")


class TestLoad:
    def test_load_populates_and_clears_selection(self, repository, notes_dir):
        repository.save("todo", "buy milk")
        store = NoteStore(repository)
        assert store.load() == 1
        assert store.selected == NO_SELECTION
        assert store.notes[0].content == "buy milk"

    def test_load_respects_store_capacity(self, repository, notes_dir):
        notes_dir.mkdir()
        for i in range(5):
            (notes_dir / f"n{i}").write_text("")
        store = NoteStore(repository, capacity=3)
        assert store.load() == 3
        assert store.is_full

    def test_notes_property_is_a_copy(self, store):
        store.create_note("a")
        store.notes.clear()
        assert store.count == 1
