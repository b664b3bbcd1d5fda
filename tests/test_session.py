from codesync.collab.presence import USER_COLORS
from codesync.collab.session import EditSession
from codesync.collab.transport import EditEvent, LoopbackHub, LoopbackTransport


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


def make_pair(clock=None):
    hub = LoopbackHub()
    received = []
    ours = LoopbackTransport(hub)
    theirs = LoopbackTransport(hub)
    session = EditSession('ann', ours, color='#ff6b35', clock=clock or FakeClock(),
                          on_remote_code=received.append)
    ours.connect()
    theirs.connect()
    return session, theirs, received


def test_local_edit_is_published():
    session, theirs, _ = make_pair()
    seen = []
    theirs.on_remote_edit(seen.append)
    session.local_edit('<p>hi</p>', 9)
    assert len(seen) == 1
    assert (seen[0].kind, seen[0].user_id, seen[0].content, seen[0].position) == ('code', 'ann', '<p>hi</p>', 9)


def test_remote_edit_applied_when_idle():
    session, theirs, received = make_pair()
    theirs.publish(EditEvent('code', 'bob', 1.0, content='<b>'))
    assert received == ['<b>']
    assert session.suppressed_edits == 0


def test_remote_edit_suppressed_while_typing():
    clock = FakeClock()
    session, theirs, received = make_pair(clock)

    session.local_edit('mine')
    clock.now += 0.5
    assert session.is_typing()
    theirs.publish(EditEvent('code', 'bob', 1.0, content='theirs'))
    assert received == []
    assert session.suppressed_edits == 1

    clock.now += 0.5
    assert not session.is_typing()
    theirs.publish(EditEvent('code', 'bob', 2.0, content='theirs again'))
    assert received == ['theirs again']


def test_not_typing_before_any_edit():
    session, _, _ = make_pair()
    assert not session.is_typing()


def test_remote_users_cursors_and_selections():
    session, theirs, _ = make_pair()
    theirs.publish(EditEvent('cursor', 'bob', 5.0, position=12, color='#54a0ff'))
    theirs.publish(EditEvent('selection', 'bob', 6.0, selection=(1, 4)))

    assert set(session.users) == {'ann', 'bob'}
    assert session.users['bob'].color == '#54a0ff'
    assert session.users['bob'].last_activity == 6.0
    cursor = session.remote_cursors['bob']
    assert (cursor.position, cursor.color) == (12, '#54a0ff')
    assert session.remote_selections['bob'] == (1, 4)


def test_new_user_without_color_gets_palette_color():
    session, theirs, _ = make_pair()
    theirs.publish(EditEvent('code', 'bob', 1.0, content='x'))
    assert session.users['bob'].color == USER_COLORS[1]


def test_random_color_comes_from_palette():
    session = EditSession('ann', LoopbackTransport(LoopbackHub()))
    assert session.color in USER_COLORS


def test_cursor_and_selection_events_carry_color():
    session, theirs, _ = make_pair()
    seen = []
    theirs.on_remote_edit(seen.append)
    session.move_cursor(3)
    session.select(0, 2)
    assert [(e.kind, e.color) for e in seen] == [('cursor', '#ff6b35'), ('selection', '#ff6b35')]
    assert seen[1].selection == (0, 2)


def test_close_stops_delivery():
    session, theirs, received = make_pair()
    session.close()
    theirs.publish(EditEvent('code', 'bob', 1.0, content='x'))
    assert received == []
    assert not session.transport.is_connected
