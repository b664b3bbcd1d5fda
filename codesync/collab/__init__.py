from codesync.collab.presence import CursorPosition, User, cursor_position
from codesync.collab.session import EditSession
from codesync.collab.transport import EditEvent, LoopbackHub, LoopbackTransport, Transport

__all__ = [
    'CursorPosition', 'User', 'cursor_position', 'EditSession',
    'EditEvent', 'LoopbackHub', 'LoopbackTransport', 'Transport',
]
