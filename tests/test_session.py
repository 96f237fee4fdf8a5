import json

import pytest

from json_node_editor.config import EditorConfig
from json_node_editor.errors import PathConflict
from json_node_editor.nodes import NodeRow, SelectedNode, build_node
from json_node_editor.session import EditSession, SessionState
from json_node_editor.store import DocumentStore

DOCUMENT = {"customer": [{"name": "Ada", "age": 36, "tags": ["a"]}], "note": "hi"}


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, ok, message):
        self.calls.append((ok, message))


def make_session(document=DOCUMENT, path=("customer", 0), config=EditorConfig()):
    text = json.dumps(document, indent=2)
    store = DocumentStore(text)
    notify = Recorder()
    session = EditSession(store, build_node(document, path), notify=notify, config=config)
    return session, store, notify


def test_starts_viewing_with_flattened_rows():
    session, _, _ = make_session()
    assert session.state is SessionState.VIEWING
    assert json.loads(session.buffer) == {"name": "Ada", "age": 36}


def test_update_buffer_requires_editing():
    session, _, _ = make_session()
    with pytest.raises(RuntimeError):
        session.update_buffer("{}")
    with pytest.raises(RuntimeError):
        session.save()


def test_save_commits_patched_document():
    session, store, notify = make_session()
    session.begin_edit()
    session.update_buffer('{"name": "Grace", "age": 45}')

    ok, message = session.save()

    assert ok
    assert message == "Node updated"
    assert notify.calls == [(True, "Node updated")]
    assert session.state is SessionState.VIEWING
    assert store.has_changes
    assert store.json == store.contents
    assert json.loads(store.contents) == {"customer": [{"name": "Grace", "age": 45}], "note": "hi"}
    assert store.contents == json.dumps(json.loads(store.contents), indent=2, ensure_ascii=False)
    assert json.loads(session.buffer) == {"name": "Grace", "age": 45}


def test_malformed_input_keeps_editing():
    session, store, notify = make_session()
    before = store.contents
    session.begin_edit()
    session.update_buffer('{"name": ')

    ok, message = session.save()

    assert not ok
    assert message.startswith("Invalid JSON")
    assert notify.calls == [(False, message)]
    assert session.editing
    assert session.buffer == '{"name": '
    assert store.contents == before
    assert not store.has_changes


def test_path_conflict_keeps_editing():
    document = {"note": "hi"}
    store = DocumentStore(json.dumps(document))
    notify = Recorder()
    node = SelectedNode(id='$["note"]["x"]', path=("note", "x"), rows=[NodeRow(key=None, value=1, type="number")])
    session = EditSession(store, node, notify=notify)
    session.begin_edit()

    ok, message = session.save()

    assert not ok
    assert len(notify.calls) == 1
    assert session.editing
    assert session.buffer == "1"
    assert json.loads(store.contents) == document


def test_overwrite_policy_allows_conflicting_save():
    store = DocumentStore(json.dumps({"note": "hi"}))
    node = SelectedNode(id='$["note"]["x"]', path=("note", "x"), rows=[NodeRow(key=None, value=1, type="number")])
    session = EditSession(store, node, notify=Recorder(), config=EditorConfig(on_conflict="overwrite"))
    session.begin_edit()
    assert session.save()[0]
    assert json.loads(store.contents) == {"note": {"x": 1}}


def test_corrupt_store_is_reported():
    session, store, notify = make_session()
    store.set_contents("{not json", False)
    session.begin_edit()

    ok, message = session.save()

    assert not ok
    assert "not valid JSON" in message
    assert notify.calls == [(False, message)]
    assert store.contents == "{not json"
    assert session.editing


def test_cancel_restores_buffer_without_writing():
    session, store, notify = make_session()
    before = store.contents
    session.begin_edit()
    session.update_buffer("[1, 2, 3]")

    session.cancel()

    assert session.state is SessionState.VIEWING
    assert json.loads(session.buffer) == {"name": "Ada", "age": 36}
    assert store.contents == before
    assert notify.calls == []


def test_selection_change_discards_dirty_buffer():
    session, store, notify = make_session()
    before = store.contents
    session.begin_edit()
    session.update_buffer('{"name": "Mallory"}')

    session.select(build_node(DOCUMENT, ()))

    assert session.state is SessionState.VIEWING
    assert session.node.path == ()
    assert json.loads(session.buffer) == {"note": "hi"}
    assert store.contents == before
    assert notify.calls == []


def test_reselecting_same_node_keeps_edit():
    session, _, _ = make_session()
    session.begin_edit()
    session.update_buffer('{"name": "Eve"}')

    session.select(build_node(DOCUMENT, ("customer", 0)))

    assert session.editing
    assert session.buffer == '{"name": "Eve"}'


def test_root_save_replaces_document():
    session, store, _ = make_session(path=())
    session.begin_edit()
    session.update_buffer('{"x": 1}')
    assert session.save() == (True, "Node updated")
    assert json.loads(store.contents) == {"x": 1}


def test_scalar_node_save():
    session, store, _ = make_session(path=("note",))
    assert session.begin_edit() == '"hi"'
    session.update_buffer("[1, 2]")
    assert session.save()[0]
    assert json.loads(store.contents)["note"] == [1, 2]


def test_path_conflict_error_type():
    assert issubclass(PathConflict, ValueError)


@pytest.mark.parametrize("text", ["NaN", "Infinity", '{"name": -Infinity}'])
def test_non_standard_number_keeps_editing(text):
    session, store, notify = make_session()
    before = store.contents
    session.begin_edit()
    session.update_buffer(text)

    ok, message = session.save()

    assert not ok
    assert message.startswith("Invalid JSON")
    assert notify.calls == [(False, message)]
    assert session.editing
    assert session.buffer == text
    assert store.contents == before
    assert not store.has_changes
