"""Keyboard to intent mapping.

Pure lookup: the same key press always maps to the same intent whatever the
picker is currently showing.
"""
from __future__ import annotations
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple

class Intent(Enum):
	MOVE_DOWN = 'move_down'
	MOVE_UP = 'move_up'
	BACK = 'back'
	ENTER = 'enter'
	FOCUS_INPUT = 'focus_input'
	QUIT = 'quit'

# Named keys match whatever modifiers are held
NAMED_KEYS = {
	'escape': Intent.BACK,
	'tab': Intent.FOCUS_INPUT,
}

CONTROL_KEYS = {
	'j': Intent.MOVE_DOWN,
	'k': Intent.MOVE_UP,
	'h': Intent.BACK,
	'l': Intent.ENTER,
	'q': Intent.QUIT,
}

def key_to_intent(key: str, modifiers: Iterable[str] = ()) -> Optional[Intent]:
	if key in NAMED_KEYS:
		return NAMED_KEYS[key]
	if 'ctrl' in set(modifiers):
		return CONTROL_KEYS.get(key)
	return None

def parse_key(spec: str) -> Tuple[str, FrozenSet[str]]:
	"""Split a key description like `ctrl+j` into `('j', {'ctrl'})`."""
	*mods, key = spec.split('+')
	return key, frozenset(mods)

def bound_keys() -> List[str]:
	return list(NAMED_KEYS) + [f'ctrl+{c}' for c in CONTROL_KEYS]
