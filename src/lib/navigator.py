"""Navigation state machine for the picker.

The navigator owns all picker state and is only changed by `update()`, one
message at a time. It never performs I/O: every request to the outside world
(enumerate the store, decrypt a secret, copy to the clipboard, exit) is
returned as an effect for the event loop to carry out. Completions come back
as messages.

Modes:
- LIST: browsing secret identifiers from the store.
- DETAIL: browsing the fields parsed out of one secret.

`loading` is true between a store enumeration request and its result.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Union
from .actions import Intent
from .parser import Fields, parse_content

log = logging.getLogger(__name__)

class ViewMode(Enum):
	LIST = 'list'
	DETAIL = 'detail'


# --- Messages ---

@dataclass(frozen=True)
class EntriesLoaded:
	entries: Dict[str, str]

@dataclass(frozen=True)
class FilterChanged:
	text: str

@dataclass(frozen=True)
class Submit:
	pass

@dataclass(frozen=True)
class KeyIntent:
	intent: Intent

@dataclass(frozen=True)
class SecretResolved:
	plaintext: str
	ticket: int

@dataclass(frozen=True)
class ResolveFailed:
	reason: str
	ticket: int

@dataclass(frozen=True)
class DeliveryFinished:
	error: Optional[str] = None

Message = Union[EntriesLoaded, FilterChanged, Submit, KeyIntent, SecretResolved, ResolveFailed, DeliveryFinished]


# --- Effects ---

@dataclass(frozen=True)
class LoadEntries:
	pass

@dataclass(frozen=True)
class ResolveSecret:
	identifier: str
	ticket: int

@dataclass(frozen=True)
class Deliver:
	value: str

@dataclass(frozen=True)
class FocusInput:
	pass

@dataclass(frozen=True)
class Exit:
	error: Optional[str] = None

Effect = Union[LoadEntries, ResolveSecret, Deliver, FocusInput, Exit]


@dataclass
class Navigator:
	mode: ViewMode = ViewMode.LIST
	entries: Dict[str, str] = field(default_factory=dict)
	filter_text: str = ''
	index: int = 0
	loading: bool = True
	source: Optional[str] = None
	pending: Optional[int] = None
	finishing: bool = False
	_tickets: int = 0

	# --- queries ---

	def filtered_keys(self) -> List[str]:
		return sorted(k for k in self.entries if self.filter_text in k)

	def selected_key(self) -> Optional[str]:
		keys = self.filtered_keys()
		if 0 <= self.index < len(keys):
			return keys[self.index]
		return None

	# --- transitions ---

	def start(self) -> List[Effect]:
		self.loading = True
		return [LoadEntries()]

	def update(self, message: Message) -> List[Effect]:
		if isinstance(message, DeliveryFinished):
			if message.error:
				log.error('Clipboard delivery failed: %s', message.error)
			return [Exit()]
		if self.finishing:
			if isinstance(message, KeyIntent) and message.intent is Intent.QUIT:
				return [Exit()]
			return []
		if isinstance(message, EntriesLoaded):
			return self._load(message.entries)
		if isinstance(message, FilterChanged):
			self.filter_text = message.text
			self.index = 0
			return []
		if isinstance(message, Submit):
			return self._enter()
		if isinstance(message, KeyIntent):
			return self._handle_intent(message.intent)
		if isinstance(message, SecretResolved):
			if not self._claim(message.ticket):
				return []
			return self._resolved(message.plaintext)
		if isinstance(message, ResolveFailed):
			if not self._claim(message.ticket):
				return []
			return [Exit(message.reason)]
		raise TypeError(f'Unknown message: {message!r}')

	def _load(self, entries: Dict[str, str]) -> List[Effect]:
		self.mode = ViewMode.LIST
		self.entries = dict(entries)
		self.filter_text = ''
		self.index = 0
		self.loading = False
		self.source = None
		return [FocusInput()]

	def _claim(self, ticket: int) -> bool:
		if ticket != self.pending:
			log.info('Discarding stale resolution %s (pending: %s)', ticket, self.pending)
			return False
		self.pending = None
		return True

	def _handle_intent(self, intent: Intent) -> List[Effect]:
		size = len(self.filtered_keys())
		if intent is Intent.MOVE_DOWN:
			if size: self.index = (self.index + 1) % size
			return []
		if intent is Intent.MOVE_UP:
			if size: self.index = (self.index + size - 1) % size
			return []
		if intent is Intent.ENTER:
			return self._enter()
		if intent is Intent.BACK:
			return self._back()
		if intent is Intent.FOCUS_INPUT:
			return [FocusInput()]
		if intent is Intent.QUIT:
			return [Exit()]
		return []

	def _enter(self) -> List[Effect]:
		key = self.selected_key()
		if key is None:
			return []
		if self.mode is ViewMode.DETAIL:
			return self._finish(self.entries[key])
		if self.pending is not None:
			log.debug('Resolution %s still pending; ignoring enter', self.pending)
			return []
		self._tickets += 1
		self.pending = self._tickets
		self.source = key
		return [ResolveSecret(self.entries[key], self.pending)]

	def _back(self) -> List[Effect]:
		if self.mode is ViewMode.DETAIL:
			self.mode = ViewMode.LIST
			self.entries = {}
			self.filter_text = ''
			self.index = 0
			self.loading = True
			self.source = None
			return [LoadEntries()]
		return [Exit()]

	def _resolved(self, plaintext: str) -> List[Effect]:
		parsed = parse_content(plaintext)
		if isinstance(parsed, Fields):
			self.mode = ViewMode.DETAIL
			self.entries = dict(parsed.fields)
			self.filter_text = ''
			self.index = 0
			return [FocusInput()]
		return self._finish(parsed.value)

	def _finish(self, value: str) -> List[Effect]:
		self.finishing = True
		return [Deliver(value)]
