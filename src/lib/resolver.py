"""Secret resolution through the `pass` command line tool."""
from __future__ import annotations
import logging, os, subprocess
from pathlib import Path
from typing import Sequence
from config.settings import PASS_COMMAND

log = logging.getLogger(__name__)

class ResolveError(Exception):
	pass

class PassResolver:
	def __init__(self, command: Sequence[str] = PASS_COMMAND, store_root: Path | None = None):
		self.command = list(command)
		self.store_root = store_root

	def _env(self):
		if self.store_root is None:
			return None
		env = dict(os.environ)
		env['PASSWORD_STORE_DIR'] = str(self.store_root)
		return env

	def resolve(self, identifier: str) -> str:
		"""Return the decrypted text of `identifier`.

		Raises ResolveError when the command cannot be started, exits with a
		non-zero status or prints something that is not valid UTF-8.
		"""
		try:
			proc = subprocess.run(self.command + [identifier], capture_output=True, env=self._env())
		except OSError as e:
			raise ResolveError(f'Failed to run {self.command[0]}: {e}') from e
		if proc.returncode != 0:
			detail = proc.stderr.decode('utf-8', errors='replace').strip()
			log.warning('%s exited with %s for %s', self.command[0], proc.returncode, identifier)
			msg = f'{self.command[0]} failed (exit status {proc.returncode})'
			raise ResolveError(f'{msg}: {detail}' if detail else msg)
		try:
			return proc.stdout.decode('utf-8')
		except UnicodeDecodeError as e:
			raise ResolveError(f'Invalid UTF-8 from {self.command[0]}') from e
