"""Textual front end and event loop for the picker.

The app is the single consumer of navigator messages: key presses, input
events and collaborator completions all end up in `dispatch()`. Store,
resolver and clipboard calls run in thread workers and report back with
`Completed` messages.
"""
from __future__ import annotations
import logging
from typing import Iterable, Optional, Tuple
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.message import Message
from textual.widgets import Input, Static
from config.settings import APP_TITLE, INPUT_PLACEHOLDER, MAX_VISIBLE_ROWS, THEME
from src.lib.actions import bound_keys, key_to_intent, parse_key
from src.lib.clipboard import ClipboardSink, DeliverError
from src.lib.navigator import (
	Deliver, DeliveryFinished, EntriesLoaded, Exit, FilterChanged, FocusInput, KeyIntent,
	LoadEntries, Navigator, ResolveFailed, ResolveSecret, SecretResolved, Submit, ViewMode,
)
from src.lib.resolver import PassResolver, ResolveError
from src.lib.store import PasswordStore

log = logging.getLogger(__name__)


def visible_window(total: int, index: int, height: int) -> Tuple[int, int]:
	"""Return the `[start, end)` slice of rows to draw so `index` stays visible."""
	if total <= height:
		return 0, total
	start = min(max(index - height // 2, 0), total - height)
	return start, start + height


class Completed(Message):
	"""A background collaborator call finished."""

	def __init__(self, payload) -> None:
		super().__init__()
		self.payload = payload


class PickerApp(App[Optional[str]]):
	"""Pick a secret and copy it; the return value is a fatal error, if any."""

	TITLE = APP_TITLE
	CSS = """
	Screen { align: center middle; }
	#picker { width: 60; height: auto; padding: 1 2; border: round $primary; }
	#status { color: $text-muted; }
	#results { height: auto; margin-top: 1; }
	"""
	BINDINGS = [Binding(k, f"dispatch_key('{k}')", show=False, priority=True) for k in bound_keys()]

	def __init__(self, store: PasswordStore | None = None, resolver: PassResolver | None = None, sink: ClipboardSink | None = None):
		super().__init__()
		self.store = store or PasswordStore()
		self.resolver = resolver or PassResolver(store_root=self.store.root)
		self.sink = sink or ClipboardSink()
		self.navigator = Navigator()

	def compose(self) -> ComposeResult:
		with Vertical(id='picker'):
			yield Input(placeholder=INPUT_PLACEHOLDER, id='input')
			yield Static(id='status')
			yield Static(id='results')

	def on_mount(self) -> None:
		self.theme = THEME
		self._apply(self.navigator.start())
		self._refresh_view()

	# --- inputs ---

	def action_dispatch_key(self, spec: str) -> None:
		key, modifiers = parse_key(spec)
		intent = key_to_intent(key, modifiers)
		if intent is not None:
			self.dispatch(KeyIntent(intent))

	def on_input_changed(self, event: Input.Changed) -> None:
		if event.value != self.navigator.filter_text:
			self.dispatch(FilterChanged(event.value))

	def on_input_submitted(self, event: Input.Submitted) -> None:
		self.dispatch(Submit())

	def on_completed(self, message: Completed) -> None:
		self.dispatch(message.payload)

	def dispatch(self, message) -> None:
		self._apply(self.navigator.update(message))
		self._refresh_view()

	# --- effects ---

	def _apply(self, effects: Iterable) -> None:
		for effect in effects:
			if isinstance(effect, LoadEntries):
				self.run_worker(self._load_entries, thread=True, group='store')
			elif isinstance(effect, ResolveSecret):
				self.run_worker(lambda e=effect: self._resolve(e), thread=True, group='resolve')
			elif isinstance(effect, Deliver):
				self.run_worker(lambda e=effect: self._deliver(e), thread=True, group='deliver')
			elif isinstance(effect, FocusInput):
				self.query_one('#input', Input).focus()
			elif isinstance(effect, Exit):
				self.exit(effect.error)

	def _load_entries(self) -> None:
		self.post_message(Completed(EntriesLoaded(self.store.list_secrets())))

	def _resolve(self, effect: ResolveSecret) -> None:
		try:
			payload = SecretResolved(self.resolver.resolve(effect.identifier), effect.ticket)
		except ResolveError as e:
			payload = ResolveFailed(str(e), effect.ticket)
		self.post_message(Completed(payload))

	def _deliver(self, effect: Deliver) -> None:
		error = None
		try:
			self.sink.deliver(effect.value)
		except DeliverError as e:
			error = str(e)
		self.post_message(Completed(DeliveryFinished(error)))

	# --- view ---

	def _status_line(self) -> str:
		nav = self.navigator
		if nav.loading:
			return 'Loading…'
		if nav.mode is ViewMode.DETAIL:
			return f'Fields of {nav.source}' if nav.source else 'Fields'
		if nav.pending is not None:
			return f'Decrypting {nav.source}…'
		return f'{len(nav.filtered_keys())} of {len(nav.entries)} secrets'

	def _refresh_view(self) -> None:
		nav = self.navigator
		search = self.query_one('#input', Input)
		if search.value != nav.filter_text:
			search.value = nav.filter_text
		self.query_one('#status', Static).update(self._status_line())
		keys = nav.filtered_keys()
		start, end = visible_window(len(keys), nav.index, MAX_VISIBLE_ROWS)
		rows = Text()
		for i in range(start, end):
			if i > start:
				rows.append('\n')
			style = 'reverse bold' if i == nav.index else ''
			rows.append(f' {keys[i]} ', style=style)
		self.query_one('#results', Static).update(rows)
