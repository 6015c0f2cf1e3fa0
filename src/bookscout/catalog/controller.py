# ABOUTME: SearchController, the stateful core that turns user intents into catalog requests.
# ABOUTME: Debounces free text, cancels superseded requests, and applies only the latest outcome.

import asyncio
import logging
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import Any, Protocol

from bookscout.catalog.intents import Category, FreeText, SearchIntent, Trending
from bookscout.catalog.outcome import (
    BookLookupError,
    ErrorKind,
    SearchFailure,
    SearchOutcome,
    SearchResults,
)
from bookscout.catalog.types import Book

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.5
# Trimmed free text shorter than this never reaches the network.
MIN_QUERY_LENGTH = 3


class Catalog(Protocol):
    """What the controller needs from a catalog client."""

    async def search(
        self, intent: SearchIntent, cancel: asyncio.Event | None = None
    ) -> SearchOutcome: ...

    async def get_by_id(self, book_id: str, cancel: asyncio.Event | None = None) -> Book: ...


@dataclass(frozen=True)
class Idle:
    """Nothing searched yet, or the search was cleared."""


@dataclass(frozen=True)
class Loading:
    """A request for the current intent is in flight.

    books and total_count hold previously shown results during a refresh,
    and are empty otherwise.
    """

    books: tuple[Book, ...] = ()
    total_count: int = 0


@dataclass(frozen=True)
class Ready:
    books: tuple[Book, ...]
    total_count: int


@dataclass(frozen=True)
class Errored:
    message: str


SearchState = Idle | Loading | Ready | Errored
StateListener = Callable[[SearchState], None]


@dataclass
class _Request:
    generation: int
    cancel: asyncio.Event


class SearchController:
    """Owns the current search intent and the state shown to the user.

    Intent methods (submit_free_text, select_category, load_trending,
    refresh, clear, search) never block: they schedule work on the running
    event loop and return. Observers read the snapshot properties or pass a
    listener that is called after every state change.

    Every request captures the generation counter at the time it starts.
    Starting another request bumps the counter and sets the previous
    request's cancel event, and an outcome is applied only if its generation
    is still current. The catalog may ignore the cancel event entirely and
    stale results are still dropped.
    """

    def __init__(
        self,
        catalog: Catalog,
        *,
        debounce: float = DEFAULT_DEBOUNCE_SECONDS,
        min_query_length: int = MIN_QUERY_LENGTH,
        listener: StateListener | None = None,
    ) -> None:
        self._catalog = catalog
        self._debounce = debounce
        self._min_query_length = min_query_length
        self._listener = listener
        self._state: SearchState = Idle()
        self._intent: SearchIntent | None = None
        self._generation = 0
        self._debounce_task: asyncio.Task[None] | None = None
        self._in_flight: _Request | None = None
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def state(self) -> SearchState:
        return self._state

    @property
    def intent(self) -> SearchIntent | None:
        return self._intent

    @property
    def selected_category(self) -> str | None:
        if isinstance(self._intent, Category):
            return self._intent.category_id
        return None

    @property
    def books(self) -> tuple[Book, ...]:
        if isinstance(self._state, (Ready, Loading)):
            return self._state.books
        return ()

    @property
    def total_count(self) -> int:
        if isinstance(self._state, (Ready, Loading)):
            return self._state.total_count
        return 0

    @property
    def error_message(self) -> str | None:
        if isinstance(self._state, Errored):
            return self._state.message
        return None

    @property
    def is_loading(self) -> bool:
        return isinstance(self._state, Loading)

    def submit_free_text(self, text: str) -> None:
        """Record a keystroke; the search fires once typing pauses.

        Blank text clears the search and falls back to trending. Otherwise the
        intent switches to the typed text right away, so any request for an
        earlier intent is cancelled and its outcome dropped. Each call
        replaces the pending debounce timer, so a burst of calls issues at
        most one request, for the last text.
        """
        query = text.strip()
        if not query:
            self.clear()
            return
        intent = FreeText(query)
        if intent != self._intent:
            self._cancel_in_flight()
            self._generation += 1
            self._intent = intent
        self._cancel_debounce()
        self._debounce_task = self._spawn(self._debounced(query))

    def select_category(self, category_id: str) -> None:
        self._start(Category(category_id))

    def load_trending(self) -> None:
        self._start(Trending())

    def search(self, intent: SearchIntent) -> None:
        """Switch to an arbitrary intent immediately, bypassing the debounce."""
        self._start(intent)

    def refresh(self) -> None:
        """Re-issue the current search, keeping shown results until it completes.

        Typed text still waiting on the debounce is searched immediately.
        Text too short to search is left alone.
        """
        intent = self._intent or Trending()
        if isinstance(intent, FreeText) and not self._searchable(intent.query):
            logger.debug("Query %r below minimum length, not refreshing", intent.query)
            return
        self._start(intent, retain=True)

    def clear(self) -> None:
        """Drop the query, category and results, then reload trending."""
        self._cancel_debounce()
        self._cancel_in_flight()
        self._generation += 1
        self._intent = None
        self._set_state(Idle())
        self.load_trending()

    async def get_by_id(self, book_id: str) -> Book | None:
        """Fetch one book for a detail view.

        Returns None on failure, with the message exposed through
        error_message. A successful lookup leaves the search state alone.
        """
        try:
            return await self._catalog.get_by_id(book_id)
        except BookLookupError as exc:
            if exc.kind is not ErrorKind.CANCELLED:
                self._set_state(Errored(exc.message))
            return None

    async def wait_until_settled(self) -> None:
        """Wait for the debounce timer and every outstanding request to finish."""
        while True:
            pending = [task for task in self._tasks if not task.done()]
            if not pending:
                return
            results = await asyncio.gather(*pending, return_exceptions=True)
            for result in results:
                if isinstance(result, Exception):
                    raise result

    async def aclose(self) -> None:
        """Cancel the debounce timer and every outstanding request."""
        self._cancel_debounce()
        self._cancel_in_flight()
        self._generation += 1
        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _set_state(self, state: SearchState) -> None:
        self._state = state
        if self._listener is not None:
            self._listener(state)

    def _cancel_debounce(self) -> None:
        if self._debounce_task is not None:
            self._debounce_task.cancel()
            self._debounce_task = None

    def _cancel_in_flight(self) -> None:
        if self._in_flight is not None:
            self._in_flight.cancel.set()
            self._in_flight = None

    def _searchable(self, query: str) -> bool:
        return len(query) >= self._min_query_length

    async def _debounced(self, query: str) -> None:
        await asyncio.sleep(self._debounce)
        self._debounce_task = None
        if not self._searchable(query):
            logger.debug("Query %r below minimum length, not searching", query)
            # A request superseded by the typing can no longer finish loading.
            if self.is_loading:
                self._set_state(Idle())
            return
        self._start(FreeText(query))

    def _start(self, intent: SearchIntent, *, retain: bool = False) -> None:
        self._cancel_debounce()
        self._cancel_in_flight()
        self._generation += 1
        self._intent = intent

        if retain:
            self._set_state(Loading(self.books, self.total_count))
        else:
            self._set_state(Loading())

        request = _Request(generation=self._generation, cancel=asyncio.Event())
        self._in_flight = request
        self._spawn(self._execute(intent, request))

    async def _execute(self, intent: SearchIntent, request: _Request) -> None:
        outcome = await self._catalog.search(intent, cancel=request.cancel)

        if request.generation != self._generation:
            logger.debug("Discarding outcome for superseded intent %r", intent)
            return
        if isinstance(outcome, SearchFailure) and outcome.is_cancelled:
            logger.debug("Discarding cancelled outcome for intent %r", intent)
            return

        self._in_flight = None
        if isinstance(outcome, SearchResults):
            self._set_state(Ready(books=outcome.books, total_count=outcome.total_count))
        else:
            self._set_state(Errored(outcome.message))
