"""
Local editing session on top of a Transport.

Remote code edits are not applied while the local user is typing: an edit
arriving inside the typing window after the last local keystroke is
counted as suppressed and dropped.
"""

import logging
import random
import time
from typing import Callable, Dict, Optional

from codesync.collab.presence import USER_COLORS, RemoteCursor, User, color_for_index
from codesync.collab.transport import EditEvent, Transport, now_ms

TYPING_WINDOW_S = 0.8


class EditSession:
    def __init__(self, user_id: str, transport: Transport, color: Optional[str] = None,
                 typing_window: float = TYPING_WINDOW_S, clock: Callable[[], float] = time.monotonic,
                 on_remote_code: Optional[Callable[[str], None]] = None):
        self.user_id = user_id
        self.transport = transport
        self.color = color or random.choice(USER_COLORS)
        self.typing_window = typing_window
        self.clock = clock
        self.on_remote_code = on_remote_code

        self.users: Dict[str, User] = {user_id: User(user_id, user_id, self.color)}
        self.remote_cursors: Dict[str, RemoteCursor] = {}
        self.remote_selections: Dict[str, tuple] = {}
        self.suppressed_edits = 0
        self._last_local_edit: Optional[float] = None

        self._unsubscribe = transport.on_remote_edit(self._handle_remote)

    # --- Local side ---
    def is_typing(self) -> bool:
        if self._last_local_edit is None:
            return False
        return self.clock() - self._last_local_edit < self.typing_window

    def mark_typing(self):
        self._last_local_edit = self.clock()

    def local_edit(self, content: str, position: int = 0):
        self.mark_typing()
        self.transport.publish(EditEvent('code', self.user_id, now_ms(), content=content, position=position))

    def move_cursor(self, position: int):
        self.transport.publish(EditEvent('cursor', self.user_id, now_ms(), position=position, color=self.color))

    def select(self, start: int, end: int):
        self.transport.publish(EditEvent('selection', self.user_id, now_ms(), selection=(start, end), color=self.color))

    def close(self):
        self._unsubscribe()
        self.transport.close()

    # --- Remote side ---
    def _user_for(self, event: EditEvent) -> User:
        user = self.users.get(event.user_id)
        if user is None:
            color = event.color or color_for_index(len(self.users))
            user = User(event.user_id, event.user_id, color)
            self.users[event.user_id] = user
            logging.info(f"EditSession - {event.user_id} joined")
        user.last_activity = event.timestamp
        return user

    def _handle_remote(self, event: EditEvent):
        user = self._user_for(event)

        if event.kind == 'code':
            if self.is_typing():
                self.suppressed_edits += 1
                logging.debug(f"EditSession - suppressed remote edit from {event.user_id} while typing")
                return
            if self.on_remote_code is not None and event.content is not None:
                self.on_remote_code(event.content)
        elif event.kind == 'cursor' and event.position is not None:
            self.remote_cursors[event.user_id] = RemoteCursor(event.user_id, event.position, user.color)
        elif event.kind == 'selection' and event.selection is not None:
            self.remote_selections[event.user_id] = event.selection
