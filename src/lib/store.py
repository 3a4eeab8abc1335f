"""Password store enumeration.

Secrets are the `*.gpg` files below the store root; each one is identified by
its path relative to the root with the extension stripped (`email/work`).
"""
from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict
from config.settings import SECRET_EXTENSION, store_dir

log = logging.getLogger(__name__)

class PasswordStore:
	def __init__(self, root: Path | None = None):
		# Resolve path dynamically to honor environment overrides in tests
		self.root = Path(root) if root is not None else store_dir()

	def exists(self) -> bool:
		return self.root.is_dir()

	def list_secrets(self) -> Dict[str, str]:
		"""Return every secret identifier mapped to itself.

		A missing store yields an empty mapping rather than an error.
		"""
		if not self.exists():
			log.warning('No password store at %s', self.root)
			return {}
		found: Dict[str, str] = {}
		try:
			for path in self.root.rglob(f'*{SECRET_EXTENSION}'):
				if not path.is_file(): continue
				ident = path.relative_to(self.root).with_suffix('').as_posix()
				found[ident] = ident
		except OSError as e:
			log.warning('Cannot read password store %s: %s', self.root, e)
			return {}
		log.debug('Found %d secrets under %s', len(found), self.root)
		return found
