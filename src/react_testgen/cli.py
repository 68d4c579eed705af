"""Command-line interface for react-testgen."""

import argparse
import logging
import os
import sys
import traceback
from typing import List, Optional

from react_testgen.config import Config, DEFAULT_CONFIG_FILE
from react_testgen.core import ReactTestgenApp
from react_testgen.exceptions import ReactTestgenError
from react_testgen.models.data_models import CliOptions, DEFAULT_ROOT_DIR, GenerationSummary
from react_testgen.utils.user_feedback import UserFeedback


def configure_logging(verbose: bool = False, quiet: bool = False):
    """Configure logging based on verbosity level."""
    if quiet:
        logging.basicConfig(level=logging.ERROR, format='%(message)s')
    elif verbose:
        # Full logging with timestamps in verbose mode
        logging.basicConfig(
            level=logging.DEBUG,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    else:
        logging.basicConfig(
            level=logging.WARNING,
            format='%(levelname)s: %(message)s'
        )
        # User feedback goes through the console, not the logging system
        logging.getLogger('react_testgen').setLevel(logging.ERROR)

logger = logging.getLogger(__name__)


def setup_argparse() -> argparse.ArgumentParser:
    """Set up command line argument parser.

    The root directory is not declared as a positional; it is picked from
    the leftover tokens by ``parse_arguments``.
    """
    parser = argparse.ArgumentParser(
        prog="react-testgen",
        usage="%(prog)s [root_dir] [--dry-run] [--force] [options]",
        description="Generate skeletal test files for React components that lack one",
        epilog=f"root_dir: directory to scan, the first argument not starting with '-' "
               f"(default: discovery.root_dir from config, else '{DEFAULT_ROOT_DIR}')",
        allow_abbrev=False,
    )
    parser.set_defaults(root_dir=None)

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be written without writing anything"
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite test files that already exist"
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Minimal output mode - only show results and errors"
    )
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_FILE,
        help=f"Configuration file (default: {DEFAULT_CONFIG_FILE})"
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a sample configuration file and exit"
    )

    return parser


def parse_arguments(tokens: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line tokens, ignoring anything unrecognized.

    The root directory is the first leftover token that does not start
    with ``-``. Other leftovers end up in ``args.ignored``.
    """
    if tokens is None:
        tokens = sys.argv[1:]

    # argparse reads '--' as end of options; here it is just an unknown flag
    passed = [token for token in tokens if token != '--']
    ignored = ['--'] * (len(tokens) - len(passed))

    args, unknown = setup_argparse().parse_known_args(passed)

    for token in unknown:
        if args.root_dir is None and not token.startswith('-'):
            args.root_dir = token
        else:
            ignored.append(token)
    args.ignored = ignored
    return args


def build_cli_options(args: argparse.Namespace, default_root_dir: str = DEFAULT_ROOT_DIR) -> CliOptions:
    """Freeze parsed arguments into CliOptions."""
    return CliOptions(
        root_dir=args.root_dir or default_root_dir,
        dry_run=args.dry_run,
        force=args.force,
        verbose=args.verbose,
        quiet=args.quiet,
        config_file=args.config,
        init_config=args.init_config,
    )


def parse_cli_options(tokens: Optional[List[str]] = None, default_root_dir: str = DEFAULT_ROOT_DIR) -> CliOptions:
    """Parse command line tokens into CliOptions."""
    return build_cli_options(parse_arguments(tokens), default_root_dir)


def handle_init_config_mode(options: CliOptions, feedback: UserFeedback):
    """Write a sample configuration file."""
    config_file = options.config_file

    if os.path.exists(config_file) and not options.force:
        feedback.warning(
            f"Configuration file {config_file} already exists",
            "Re-run with --force to overwrite it."
        )
        return

    Config(None).create_sample_config(config_file)
    feedback.success(f"Sample configuration created at {config_file}")


def report_summary(summary: GenerationSummary, options: CliOptions, feedback: UserFeedback):
    if feedback.quiet:
        if options.dry_run:
            feedback.result(f"{len(summary.planned)} test file(s) would be written")
        else:
            feedback.result(f"{summary.written} test file(s) written")
        return

    if feedback.verbose:
        feedback.summary_panel("Execution Summary", {
            "Root": options.root_dir,
            "Component files": summary.files_found,
            "Created": len(summary.created),
            "Overwritten": len(summary.overwritten),
            "Skipped (test exists)": len(summary.skipped),
            "Planned (dry run)": len(summary.planned),
        }, "green")


def main(argv: Optional[List[str]] = None):
    """Main execution function."""
    feedback = None

    try:
        args = parse_arguments(argv)

        feedback = UserFeedback(verbose=args.verbose, quiet=args.quiet)
        configure_logging(verbose=args.verbose, quiet=args.quiet)
        if args.ignored:
            logger.debug(f"Ignoring unrecognized arguments: {args.ignored}")

        if args.init_config:
            handle_init_config_mode(build_cli_options(args), feedback)
            return

        config = Config(args.config)
        options = build_cli_options(args, config.get('discovery.root_dir', DEFAULT_ROOT_DIR))
        logger.debug(f"Running with {options}")

        app = ReactTestgenApp(options.root_dir, config, feedback)
        summary = app.run(dry_run=options.dry_run, force=options.force)
        report_summary(summary, options, feedback)

    except KeyboardInterrupt:
        if feedback:
            feedback.warning("Operation cancelled by user")
        else:
            print("\nOperation cancelled by user")
        sys.exit(130)

    except ReactTestgenError as e:
        if feedback:
            feedback.error(e.message, e.suggestion)
        else:
            print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except Exception as e:
        if feedback:
            feedback.error(f"Unexpected error: {e}")
            if feedback.verbose:
                feedback.error("Full traceback:", details=traceback.format_exc())
        else:
            print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
