#!/usr/bin/env python3
# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""CLI entry point for validating stencil definition directories."""

import argparse
import logging
import sys
from typing import List

from .. import __version__
from ..config import ValidatorConfig
from . import FailOn, ValidateOptions, validate_stencil
from .report import EXIT_ERRORS
from .render import render_failure_json, render_json, render_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='promarker',
        description='Validate stencil definition directories',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', required=True)

    validate = subparsers.add_parser(
        'validate',
        help='Validate a stencil directory (read-only)',
    )
    validate.add_argument(
        'path',
        nargs='?',
        default='.',
        help='Stencil directory to validate (default: current directory)',
    )
    validate.add_argument(
        '--format',
        choices=['text', 'json'],
        default='text',
        help='Output format (default: text)',
    )
    validate.add_argument(
        '--fail-on',
        choices=[f.value for f in FailOn],
        default=FailOn.ERROR.value,
        help='Severity that makes the command fail (default: error)',
    )
    validate.add_argument(
        '--strict',
        action='store_true',
        help='Also check naming and formatting conventions',
    )
    validate.add_argument(
        '--ignore',
        action='append',
        default=[],
        metavar='GLOB',
        help='Glob pattern excluded from the file count (repeatable)',
    )
    validate.add_argument(
        '--log-level',
        default=None,
        help='Logging level (default: STENCIL_VALIDATOR_LOG_LEVEL or WARNING)',
    )
    return parser


def run_validate(args: argparse.Namespace, config: ValidatorConfig) -> int:
    """Run the validate command and print its report.

    Returns:
        Process exit code
    """
    options = ValidateOptions(
        strict=args.strict,
        ignore=tuple(args.ignore),
        fail_on=FailOn(args.fail_on),
        settings_file_name=config.settings_file_name,
    )

    try:
        report = validate_stencil(args.path, options)
    except Exception as e:
        # Any failure still yields a parsable document and exit code 2
        logger.debug("Validation aborted", exc_info=True)
        if args.format == 'json':
            print(render_failure_json(str(e)))
        else:
            logger.error(f"Validation failed: {e}")
        return EXIT_ERRORS

    if args.format == 'json':
        print(render_json(report))
    else:
        print(render_text(report))

    return report.exit_code(options.fail_on)


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the validator CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = ValidatorConfig.from_env()
    if args.log_level:
        config.log_level = args.log_level
    config.set_logging()

    sys.exit(run_validate(args, config))


if __name__ == '__main__':
    main()
