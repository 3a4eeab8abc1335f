"""CLI command implemented with click.

`passpick` takes no arguments: it opens the picker, and whatever the user
settles on ends up on the clipboard. Fatal errors are reported on stderr after
the interface has closed; the exit status stays 0.
"""
from __future__ import annotations
import logging
from importlib.metadata import PackageNotFoundError, version
import click
from config.settings import LOG_FILE, LOG_LEVEL

log = logging.getLogger(__name__)

def _version() -> str:
	try:
		return version('passpick')
	except PackageNotFoundError:
		return '0.0.0'

def setup_logging():
	# The terminal belongs to the interface; log to a file instead.
	try:
		LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
		logging.basicConfig(filename=LOG_FILE, level=LOG_LEVEL, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
	except OSError:
		logging.basicConfig(level=logging.CRITICAL)

@click.command()
@click.version_option(_version(), prog_name='passpick')
def cli():
	"""Pick a secret from the password store and copy it to the clipboard."""
	from src.ui.app import PickerApp
	setup_logging()
	error = PickerApp().run()
	if error:
		log.warning('Exiting after error: %s', error)
		click.echo(f'Error: {error}', err=True)
