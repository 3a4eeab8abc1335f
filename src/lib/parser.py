"""Classify decrypted content as an opaque secret or a key/value record.

A line such as `  login : a@b.com` is a field: optional indentation, a key made
of word characters, spaces, dots and hyphens, a colon and a non-empty value.
Content with at least one field line is a record (`Fields`); anything else is
handed back trimmed as `Raw`.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional, Tuple, Union

KEY_PUNCTUATION = '_ .-'

@dataclass(frozen=True)
class Raw:
	value: str

@dataclass(frozen=True)
class Fields:
	fields: Dict[str, str]

ParsedContent = Union[Raw, Fields]

def _is_key_char(ch: str) -> bool:
	return ch.isalnum() or ch in KEY_PUNCTUATION

def match_field(line: str) -> Optional[Tuple[str, str]]:
	"""Return `(key, value)` when `line` is a field line, otherwise None."""
	body = line.lstrip()
	end = 0
	while end < len(body) and _is_key_char(body[end]):
		end += 1
	key = body[:end].rstrip()
	if not key:
		return None
	rest = body[end:].lstrip()
	if not rest.startswith(':'):
		return None
	value = rest[1:].strip()
	if not value:
		return None
	return key, value

def parse_content(text: str) -> ParsedContent:
	fields: Dict[str, str] = {}
	for line in text.splitlines():
		found = match_field(line)
		if found:
			# later lines win on duplicate keys
			fields[found[0]] = found[1]
	if not fields:
		return Raw(text.strip())
	return Fields(fields)
