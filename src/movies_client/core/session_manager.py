# src/movies_client/core/session_manager.py
"""
Thread-local requests.Session management.

Each calling thread gets its own Session, so concurrent operations on one
client never share connection state.
"""
import threading
import weakref
from typing import Callable, Set

import requests


class ThreadSafeSessionManager:
    """
    Hands out one lazily created requests.Session per thread.

    Example:
        >>> manager = ThreadSafeSessionManager(requests.Session)
        >>> session = manager.get_session()
        >>> manager.close_all()
    """

    def __init__(self, session_factory: Callable[[], requests.Session]):
        self._session_factory = session_factory
        self._local = threading.local()

        # Weak refs so sessions of finished threads can be collected
        self._all_sessions: Set[weakref.ref] = set()
        # RLock: weakref callbacks may fire from GC while the lock is held
        self._sessions_lock = threading.RLock()

    def get_session(self) -> requests.Session:
        session = getattr(self._local, 'session', None)
        if session is None:
            session = self._session_factory()
            self._local.session = session

            with self._sessions_lock:
                self._all_sessions.add(weakref.ref(session, self._discard_ref))

        return session

    def _discard_ref(self, ref: weakref.ref) -> None:
        with self._sessions_lock:
            self._all_sessions.discard(ref)

    def close_all(self) -> None:
        """
        Close sessions created by every thread.

        Safe to call multiple times.
        """
        self._local.session = None

        with self._sessions_lock:
            refs = list(self._all_sessions)
            self._all_sessions.clear()

        for ref in refs:
            session = ref()
            if session is not None:
                session.close()

    def get_active_sessions_count(self) -> int:
        with self._sessions_lock:
            return sum(1 for ref in self._all_sessions if ref() is not None)
