"""
CLI interface for AdaptiveDrive.

Renders the context-ranked playlist and the logic debugger panel, and
replays context sequences through the debounced scheduler.
"""

import argparse
import logging
import sys
import time
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ...application.dtos.playlist_generation import PlaylistGenerationRequest, PlaylistGenerationResponse
from ...application.services import ContextScheduler, ModeClassifier, PlaylistGenerationService
from ...domain.entities import DriveContext
from ...domain.repositories import CatalogRepository
from ...infrastructure.logging import setup_logging, change_log_level
from ...infrastructure.persistence import default_catalog, load_catalog_file
from ...shared.config import AppConfig, ConfigLoader
from ...shared.exceptions import AdaptiveDriveException, ContextValidationError, SchedulerError


MODE_STYLES = {
    'HIGH_SPEED_FOCUS': 'bold red',
    'NIGHT_MODE_RELAX': 'bold blue',
    'STANDARD_ADAPTIVE': 'bold green',
}


def parse_context_spec(spec: str) -> DriveContext:
    """Parse ``SPEED,HOUR,WEATHER`` (e.g. ``95,23.5,rain``) into a context."""
    parts = [part.strip() for part in spec.split(',')]
    if len(parts) != 3:
        raise ContextValidationError(
            f"Context must look like SPEED,HOUR,WEATHER, got '{spec}'",
            field_value=spec
        )
    try:
        speed, hour = float(parts[0]), float(parts[1])
    except ValueError as e:
        raise ContextValidationError(
            f"Speed and hour must be numbers, got '{spec}'",
            field_value=spec,
            original_exception=e
        )
    return DriveContext(speed=speed, time_of_day=hour, weather=parts[2].lower())


class CLIInterface:
    """
    Command line front end.

    Commands:
    - playlist: evaluate one context and print the ranked playlist
    - simulate: feed a sequence of contexts through the settling scheduler
    """

    def __init__(self, config: Optional[AppConfig] = None, console: Optional[Console] = None):
        self.console = console or Console()
        self._config = config
        self.logger = logging.getLogger(__name__)

    def run(self, args: Optional[List[str]] = None) -> int:
        """Run the CLI interface."""
        if args is None:
            args = sys.argv[1:]
        parser = self._create_argument_parser()
        parsed_args = parser.parse_args(args)

        if not parsed_args.command:
            parser.print_help()
            return 0

        try:
            config = self._config or ConfigLoader(parsed_args.config).load_config()
            setup_logging(config)
            if parsed_args.log_level:
                change_log_level(parsed_args.log_level)

            catalog = self._load_catalog(parsed_args.catalog)
            service = PlaylistGenerationService(
                catalog,
                config=config.playlist,
                classifier=ModeClassifier(config.classifier)
            )

            if parsed_args.command == 'playlist':
                return self._handle_playlist(parsed_args, service, config)
            elif parsed_args.command == 'simulate':
                return self._handle_simulate(parsed_args, service, config)
            else:
                self.console.print(f"[red]Unknown command: {parsed_args.command}[/red]")
                return 1

        except AdaptiveDriveException as e:
            self.logger.error(f"AdaptiveDrive error: {e}", extra={'error': e.to_dict()})
            self.console.print(f"[red]Error:[/red] {escape(str(e))}")
            return 1

    def _create_argument_parser(self) -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(
            prog='adaptive-drive',
            description="AdaptiveDrive - real-time contextual playlist engine",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Highway at night in the rain
  adaptive-drive playlist --speed 110 --time 22.5 --weather rain

  # Rapid context changes; only the last one is evaluated
  adaptive-drive simulate -c 40,9,clear -c 95,9,clear -c 95,23,storm --interval 0.1
            """
        )

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--catalog', help='JSON catalog file (default: built-in demo catalog)')
        common.add_argument('--config', help='JSON configuration file')
        common.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                            help='Override the configured log level')

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        playlist_parser = subparsers.add_parser('playlist', parents=[common],
                                                help='Rank the catalog for one drive context')
        playlist_parser.add_argument('--speed', type=float, default=0.0, help='Vehicle speed in km/h (default: 0)')
        playlist_parser.add_argument('--time', type=float, default=9.0, dest='time_of_day',
                                     help='Hour of day, fractional allowed (default: 9)')
        playlist_parser.add_argument('--weather', default='clear', help='Weather tag (default: clear)')
        playlist_parser.add_argument('--strict', action='store_true',
                                     help='Reject out-of-range values and unknown weather tags')

        simulate_parser = subparsers.add_parser('simulate', parents=[common],
                                                help='Replay context changes through the settling scheduler')
        simulate_parser.add_argument('--context', '-c', action='append', required=True, dest='contexts',
                                     metavar='SPEED,HOUR,WEATHER', help='Context to submit (repeatable)')
        simulate_parser.add_argument('--interval', type=float, default=0.0,
                                     help='Seconds between submissions (default: 0)')
        simulate_parser.add_argument('--settle-ms', type=float,
                                     help='Override the settling window in milliseconds')

        return parser

    def _load_catalog(self, path: Optional[str]) -> CatalogRepository:
        if path:
            return load_catalog_file(path)
        return default_catalog()

    def _handle_playlist(self, args, service: PlaylistGenerationService, config: AppConfig) -> int:
        """Handle the playlist command."""
        context = DriveContext(speed=args.speed, time_of_day=args.time_of_day, weather=args.weather.lower())
        if args.strict:
            context.validate(config.playlist.known_weather)

        response = service.generate_playlist(PlaylistGenerationRequest(context=context))
        self.render_response(response)
        return 0

    def _handle_simulate(self, args, service: PlaylistGenerationService, config: AppConfig) -> int:
        """Handle the simulate command."""
        contexts = [parse_context_spec(spec) for spec in args.contexts]
        settle_seconds = args.settle_ms / 1000.0 if args.settle_ms is not None else config.scheduler.settle_seconds

        emitted: List[PlaylistGenerationResponse] = []

        with ContextScheduler(service, emitted.append, settle_seconds=settle_seconds) as scheduler:
            generation = 0
            for index, context in enumerate(contexts):
                if index and args.interval > 0:
                    time.sleep(args.interval)
                generation = scheduler.submit(context)
                self.console.print(f"[dim]#{generation} submitted {context} - {scheduler.status_label}[/dim]")

            if not scheduler.wait_for(generation, timeout=settle_seconds + 5.0):
                self.logger.warning("Settling timer did not fire in time, evaluating last context now")
                scheduler.flush()

            if scheduler.last_error is not None:
                raise SchedulerError(
                    "Playlist evaluation failed",
                    details=str(scheduler.last_error),
                    original_exception=scheduler.last_error
                )

        for response in emitted:
            self.render_response(response)
        self.console.print(
            f"[bold]{len(contexts)}[/bold] context(s) submitted, "
            f"[bold]{len(emitted)}[/bold] playlist(s) evaluated"
        )
        return 0

    def render_response(self, response: PlaylistGenerationResponse) -> None:
        """Print the logic debugger panel and the ranked track table."""
        style = MODE_STYLES.get(response.rule, 'bold')
        debugger = (
            f"Context: {escape(str(response.context))}\n"
            f"Rule: [{style}]{response.rule}[/{style}]\n"
            f"Filter: {response.active_filter} priority"
        )
        self.console.print(Panel(debugger, title="Logic Debugger", border_style="cyan"))

        if response.is_empty:
            self.console.print("[yellow]Catalog is empty - nothing to play[/yellow]")
            return

        table = Table(title=f"Playlist ({response.track_count} tracks)")
        table.add_column("#", justify="right", style="dim")
        table.add_column("Title", style="cyan")
        table.add_column("Artist")
        table.add_column("Type", style="magenta")
        table.add_column("BPM", justify="right")
        table.add_column("Length", justify="right")

        for position, track in enumerate(response.tracks, start=1):
            marker = "*" if track.type.lower() in response.priority_types else ""
            table.add_row(
                str(position),
                escape(track.title),
                escape(track.artist),
                f"{track.type}{marker}",
                f"{track.tempo_bpm:g}" if track.tempo_bpm is not None else "",
                track.duration_label
            )
        self.console.print(table)
