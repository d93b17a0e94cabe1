"""
Integration tests for the command line interface.
"""

import json

import pytest
from rich.console import Console

from adaptive_drive.application.services import PlaylistGenerationService
from adaptive_drive.presentation.cli import CLIInterface, parse_context_spec
from adaptive_drive.domain.entities import DriveContext
from adaptive_drive.shared.exceptions import ContextValidationError


@pytest.fixture
def console():
    return Console(record=True, width=120, color_system=None)


@pytest.fixture
def cli(quiet_config, console):
    return CLIInterface(config=quiet_config, console=console)


def write_catalog(path, tracks):
    path.write_text(json.dumps(tracks), encoding='utf-8')
    return str(path)


class TestParseContextSpec:
    """Test SPEED,HOUR,WEATHER parsing."""

    def test_valid(self):
        assert parse_context_spec('95, 23.5, Rain') == DriveContext(95.0, 23.5, 'rain')

    @pytest.mark.parametrize('spec', ['95,23', 'fast,12,clear', '1,2,3,4'])
    def test_invalid(self, spec):
        with pytest.raises(ContextValidationError):
            parse_context_spec(spec)


class TestPlaylistCommand:
    """Test the playlist command."""

    def test_highway(self, cli, console):
        assert cli.run(['playlist', '--speed', '95', '--time', '12']) == 0
        output = console.export_text()
        assert 'Logic Debugger' in output
        assert 'Rule: HIGH_SPEED_FOCUS' in output
        assert 'Filter: ENERGETIC priority' in output
        assert 'Highway Pulse' in output

    def test_storm_puts_focus_first(self, cli, console):
        assert cli.run(['playlist', '--speed', '95', '--time', '12', '--weather', 'storm']) == 0
        assert 'Filter: FOCUS priority' in console.export_text()

    def test_night(self, cli, console):
        assert cli.run(['playlist', '--speed', '50', '--time', '22.5']) == 0
        output = console.export_text()
        assert 'Rule: NIGHT_MODE_RELAX' in output
        assert 'Filter: CALM priority' in output
        assert 'time=22:30' in output

    def test_custom_catalog(self, cli, console, tmp_path):
        path = write_catalog(tmp_path / 'catalog.json', [
            {'id': '1', 'title': 'Loud One', 'artist': 'A', 'type': 'energetic'},
            {'id': '2', 'title': 'Quiet One', 'artist': 'B', 'type': 'ambient'},
        ])
        assert cli.run(['playlist', '--catalog', path, '--time', '23']) == 0
        output = console.export_text()
        assert 'Filter: AMBIENT priority' in output
        assert output.index('Quiet One') < output.index('Loud One')

    def test_empty_catalog(self, cli, console, tmp_path):
        path = write_catalog(tmp_path / 'catalog.json', [])
        assert cli.run(['playlist', '--catalog', path, '--speed', '120']) == 0
        output = console.export_text()
        assert 'Filter: MIXED priority' in output
        assert 'Catalog is empty' in output

    def test_missing_catalog_fails(self, cli, console, tmp_path):
        assert cli.run(['playlist', '--catalog', str(tmp_path / 'missing.json')]) == 1
        assert 'Error:' in console.export_text()

    def test_unknown_weather_is_accepted_without_strict(self, cli, console):
        assert cli.run(['playlist', '--weather', 'hail']) == 0
        assert 'Rule: STANDARD_ADAPTIVE' in console.export_text()

    def test_strict_rejects_unknown_weather(self, cli, console):
        assert cli.run(['playlist', '--weather', 'hail', '--strict']) == 1
        assert "Unknown weather tag 'hail'" in console.export_text()

    def test_strict_rejects_bad_hour(self, cli):
        assert cli.run(['playlist', '--time', '25', '--strict']) == 1

    def test_non_finite_speed_without_strict(self, cli, console):
        assert cli.run(['playlist', '--speed', 'nan', '--time', 'nan']) == 0
        output = console.export_text()
        assert 'Rule: STANDARD_ADAPTIVE' in output
        assert 'time=nan' in output


class TestSimulateCommand:
    """Test the simulate command."""

    def test_only_last_context_is_evaluated(self, cli, console):
        result = cli.run([
            'simulate', '--settle-ms', '300',
            '-c', '40,9,clear', '-c', '95,9,clear', '-c', '50,23,storm'
        ])
        assert result == 0
        output = console.export_text()
        assert '#3 submitted' in output
        assert 'Analyzing Context...' in output
        assert '3 context(s) submitted, 1 playlist(s) evaluated' in output
        assert 'Rule: NIGHT_MODE_RELAX' in output
        assert 'HIGH_SPEED_FOCUS' not in output

    def test_spaced_submissions_are_each_evaluated(self, cli, console):
        result = cli.run([
            'simulate', '--settle-ms', '20', '--interval', '0.5',
            '-c', '95,12,clear', '-c', '50,12,clear'
        ])
        assert result == 0
        output = console.export_text()
        assert '2 context(s) submitted, 2 playlist(s) evaluated' in output
        assert 'Rule: HIGH_SPEED_FOCUS' in output
        assert 'Rule: STANDARD_ADAPTIVE' in output

    def test_non_finite_hour_is_evaluated(self, cli, console):
        assert cli.run(['simulate', '--settle-ms', '300', '-c', '95,inf,clear', '-c', '50,inf,clear']) == 0
        output = console.export_text()
        assert 'time=inf' in output
        assert 'Rule: NIGHT_MODE_RELAX' in output
        assert '2 context(s) submitted, 1 playlist(s) evaluated' in output

    def test_evaluation_failure_exits_with_error(self, cli, console, monkeypatch):
        def explode(self, request):
            raise RuntimeError('catalog offline')

        monkeypatch.setattr(PlaylistGenerationService, 'generate_playlist', explode)
        assert cli.run(['simulate', '--settle-ms', '20', '-c', '95,12,clear']) == 1
        assert 'Playlist evaluation failed: catalog offline' in console.export_text()

    def test_bad_context_spec_fails(self, cli, console):
        assert cli.run(['simulate', '-c', '95;12;clear']) == 1
        assert 'SPEED,HOUR,WEATHER' in console.export_text()


class TestArgumentParsing:
    """Test argument parsing edge cases."""

    def test_no_command_prints_help(self, cli, capsys):
        assert cli.run([]) == 0
        assert 'adaptive-drive' in capsys.readouterr().out

    def test_simulate_requires_context(self, cli):
        with pytest.raises(SystemExit):
            cli.run(['simulate'])
