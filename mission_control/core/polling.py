"""
Polling client for dashboard endpoints

Each PollingClient owns one timer thread that fetches a JSON endpoint
immediately and then on a fixed interval. The outcome of every tick is an
explicit PollSuccess or PollFailure, folded into a PollState by
apply_result() so the keep-stale-data contract can be checked without a
running thread or server.
"""
import enum
import logging
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

import requests

logger = logging.getLogger(__name__)


class PollPhase(enum.Enum):
    NO_DATA = 'no_data'
    FRESH = 'fresh'
    STALE = 'stale'


@dataclass(frozen=True)
class PollState:
    """What a panel sees of its endpoint"""
    data: Any = None
    loading: bool = True
    last_update: Optional[datetime] = None
    phase: PollPhase = PollPhase.NO_DATA
    error: Optional[str] = None

    @property
    def has_data(self):
        return self.phase is not PollPhase.NO_DATA


@dataclass(frozen=True)
class PollSuccess:
    data: Any
    at: datetime


@dataclass(frozen=True)
class PollFailure:
    error: str


def apply_result(state, result):
    """Fold one tick's result into the previous state

    A failure keeps the previous data and last_update. Loading only ever
    goes from True to False.
    """
    if isinstance(result, PollSuccess):
        return PollState(
            data=result.data,
            loading=False,
            last_update=result.at,
            phase=PollPhase.FRESH,
        )

    phase = PollPhase.STALE if state.has_data else PollPhase.NO_DATA
    return PollState(
        data=state.data,
        loading=False,
        last_update=state.last_update,
        phase=phase,
        error=result.error,
    )


class PollingClient:
    """Poll one JSON endpoint on a fixed interval"""

    def __init__(self, url, interval, session=None, clock=None, timeout=None):
        self.url = url
        self.interval = interval
        self.session = session or requests.Session()
        self.clock = clock or datetime.now
        self.timeout = timeout
        self.thread = None
        self._state = PollState()
        self._lock = threading.Lock()
        self._stop_event = threading.Event()

    @property
    def state(self):
        with self._lock:
            return self._state

    def fetch(self):
        """Perform one GET and classify the outcome"""
        try:
            response = self.session.get(
                self.url,
                headers={'Cache-Control': 'no-store'},
                timeout=self.timeout,
            )
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.debug('Poll of %s failed: %s', self.url, e)
            return PollFailure(str(e))
        return PollSuccess(data=data, at=self.clock())

    def poll_once(self):
        """Fetch once and return the updated state"""
        result = self.fetch()
        with self._lock:
            self._state = apply_result(self._state, result)
            return self._state

    def start(self):
        """Start the polling thread; the first fetch happens immediately"""
        if self.thread is None or not self.thread.is_alive():
            self._stop_event.clear()
            self.thread = threading.Thread(target=self._poll_loop, daemon=True)
            self.thread.start()
            logger.debug('Polling %s every %ss', self.url, self.interval)

    def stop(self):
        """Stop the polling thread"""
        self._stop_event.set()
        if self.thread:
            self.thread.join(timeout=2)

    def _poll_loop(self):
        while not self._stop_event.is_set():
            self.poll_once()
            self._stop_event.wait(self.interval)
