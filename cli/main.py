"""
Command-line driver: replays a file of price updates and rate requests.

Each line is either a quote (applied to the graph) or an
EXCHANGE_RATE_REQUEST (answered from the graph as it stands at that
point). Results go to stdout, diagnostics to the log.
"""

import argparse
import logging
import sys
from collections.abc import Iterable
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import TextIO

from application.services import ExchangeRateEngine
from cli.parser import LineParser
from config.settings import get_settings
from domain.exceptions.graph import QueryError, RecordValidationError
from domain.models.graph import BestRate, RateQuery
from infrastructure.monitoring.logger import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
	updates_applied: int = 0
	updates_stale: int = 0
	records_rejected: int = 0
	queries_answered: int = 0
	queries_failed: int = 0


def render_best_rate(best: BestRate) -> str:
	lines = [
		f'BEST_RATES_BEGIN {best.source.exchange} {best.source.currency} '
		f'{best.destination.exchange} {best.destination.currency} {best.rate}'
	]
	lines.extend(str(vertex) for vertex in best.path)
	lines.append('BEST_RATES_END')
	return '\n'.join(lines)


def process_lines(
	lines: Iterable[str], engine: ExchangeRateEngine, parser: LineParser, out: TextIO
) -> RunSummary:
	summary = RunSummary()

	for line_number, line in enumerate(lines, start=1):
		try:
			parsed = parser.parse(line)
		except RecordValidationError as e:
			summary.records_rejected += 1
			logger.warning(f'Line {line_number} rejected: {e}')
			continue

		if parsed is None:
			continue

		if isinstance(parsed, RateQuery):
			try:
				best = engine.resolve_query(parsed)
			except QueryError as e:
				summary.queries_failed += 1
				logger.warning(f'Line {line_number}: {e}')
				continue
			summary.queries_answered += 1
			print(render_best_rate(best), file=out)
			continue

		try:
			applied = engine.apply_update(parsed)
		except RecordValidationError as e:
			summary.records_rejected += 1
			logger.warning(f'Line {line_number} rejected: {e}')
			continue
		if applied:
			summary.updates_applied += 1
		else:
			summary.updates_stale += 1

	return summary


def parse_args(argv=None):
	p = argparse.ArgumentParser(description='Best exchange rates across exchanges')
	p.add_argument('input_file', help="file of price updates and rate requests, or '-' for stdin")
	p.add_argument(
		'--log-level',
		default=None,
		choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
		help='console log level (overrides LOG_LEVEL)',
	)
	return p.parse_args(argv)


def main(argv=None) -> int:
	args = parse_args(argv)
	settings = get_settings()
	setup_logging(settings, console_level=args.log_level)

	if args.input_file == '-':
		lines = sys.stdin.read().splitlines()
	else:
		try:
			lines = Path(args.input_file).read_text(encoding='utf-8').splitlines()
		except OSError as e:
			logger.error(f'Could not read {args.input_file}: {e}')
			return 1

	engine = ExchangeRateEngine.from_settings(settings)
	parser = LineParser.from_settings(settings)
	summary = process_lines(lines, engine, parser, sys.stdout)

	logger.info(
		f'Processed {len(lines)} lines over {engine.vertex_count} vertices',
		extra={'extra_data': asdict(summary)},
	)
	return 0


if __name__ == '__main__':
	sys.exit(main())
