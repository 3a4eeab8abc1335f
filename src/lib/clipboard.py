"""Clipboard delivery by piping the value into a clipboard program."""
from __future__ import annotations
import subprocess
from typing import Sequence
from config.settings import clipboard_command

class DeliverError(Exception):
	pass

class ClipboardSink:
	def __init__(self, command: Sequence[str] | None = None):
		self.command = list(command) if command else list(clipboard_command())

	def deliver(self, value: str) -> None:
		try:
			proc = subprocess.Popen(self.command, stdin=subprocess.PIPE)
		except OSError as e:
			raise DeliverError(f'Failed to run {self.command[0]}: {e}') from e
		try:
			proc.communicate(value.encode('utf-8'))
		except OSError as e:
			proc.kill(); proc.wait()
			raise DeliverError(f'Failed to write to {self.command[0]}: {e}') from e
		if proc.returncode != 0:
			raise DeliverError(f'{self.command[0]} exited with status {proc.returncode}')
