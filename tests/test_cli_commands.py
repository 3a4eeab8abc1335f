from click.testing import CliRunner
import src.ui.app as app_module
from src.cli.commands import cli

def test_cli_help():
	r = CliRunner().invoke(cli, ['--help'])
	assert r.exit_code == 0
	assert 'clipboard' in r.output

def test_cli_version():
	r = CliRunner().invoke(cli, ['--version'])
	assert r.exit_code == 0
	assert 'passpick' in r.output

def test_cli_rejects_arguments():
	r = CliRunner().invoke(cli, ['email/work'])
	assert r.exit_code != 0


class StubApp:
	result = None

	def run(self):
		return self.result


def test_cli_reports_error_on_stderr(monkeypatch, tmp_path):
	monkeypatch.setattr('src.cli.commands.LOG_FILE', tmp_path / 'passpick.log')
	monkeypatch.setattr(StubApp, 'result', 'pass failed (exit status 2)')
	monkeypatch.setattr(app_module, 'PickerApp', StubApp)
	r = CliRunner().invoke(cli, [])
	assert r.exit_code == 0
	assert 'Error: pass failed (exit status 2)' in r.stderr

def test_cli_clean_exit(monkeypatch, tmp_path):
	monkeypatch.setattr('src.cli.commands.LOG_FILE', tmp_path / 'passpick.log')
	monkeypatch.setattr(app_module, 'PickerApp', StubApp)
	r = CliRunner().invoke(cli, [])
	assert r.exit_code == 0
	assert r.output == ''
