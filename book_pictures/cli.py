"""
Book Pictures - Command Line
============================
Turn pictures into text-filled halftone grids and prepare the texts for them.

Commands:
- to_black_and_white: grayscale copy of an image
- to_grid_image: halftone grid of an image as a black and white picture
- find_distribution: gamma that makes a text exactly fill an image's grid
- create_custom_image: halftone grid drawn with the characters of a text (SVG)
- process-text: length, strip-whitespaces, replace-enters, remove-matching-lines
- tutorial: print the lines of a file containing a query
"""

import logging
import sys
from typing import List, Optional

from book_pictures.config import (
    CreateCustomImageConfig,
    FindDistributionConfig,
    GenerateGridConfig,
    GridConfig,
    RemoveMatchingLinesConfig,
    ReplaceEntersConfig,
    StripWhitespacesConfig,
    TextLengthConfig,
    ToBlackAndWhiteConfig,
    TutorialConfig,
    log_level_from_env,
    resolve_target,
)
from book_pictures.constants import (
    BLACK_AND_WHITE_TARGET,
    CUSTOM_IMAGE_TARGET,
    DEFAULT_GAMMA,
    DEFAULT_GRID_SIZE,
    LOG_LEVEL_ENV,
    PIXEL_GRID_TARGET,
    REMOVED_LINES_TARGET,
    REPLACED_ENTERS_TARGET,
    STRIPPED_TEXT_TARGET,
)
from book_pictures.errors import BookPicturesError
from book_pictures import operations

logger = logging.getLogger(__name__)


# =============================================================================
# COMMAND HANDLERS
# =============================================================================

def _grid_config(args) -> GridConfig:
    return GridConfig(grid_size=args.grid_size, gamma=args.gamma)


def handle_to_black_and_white(args) -> None:
    config = ToBlackAndWhiteConfig(
        source_path=args.source_path,
        target_path=resolve_target(args.target_path, BLACK_AND_WHITE_TARGET),
    )
    operations.run_to_black_and_white(config)
    print(f"Saved to {config.target_path}")


def handle_generate_grid(args) -> None:
    config = GenerateGridConfig(
        source_path=args.source_path,
        target_path=resolve_target(args.target_path, PIXEL_GRID_TARGET),
        grid=_grid_config(args),
    )
    operations.run_generate_grid(config)
    print(f"Saved to {config.target_path}")


def handle_find_distribution(args) -> None:
    config = FindDistributionConfig(
        img_source_path=args.img_source_path,
        text_source_path=args.text_source_path,
        grid_size=args.grid_size,
    )
    solution = operations.run_find_distribution(config)
    print(f"The best gamma is: {solution.gamma} and it has an error of: {solution.error}")


def handle_create_custom_image(args) -> None:
    config = CreateCustomImageConfig(
        img_source_path=args.img_source_path,
        text_source_path=args.text_source_path,
        target_path=resolve_target(args.target_path, CUSTOM_IMAGE_TARGET),
        grid=_grid_config(args),
    )
    operations.run_create_custom_image(config)
    print(f"Saved to {config.target_path}")


def handle_text_length(args) -> None:
    total_chars = operations.run_text_length(TextLengthConfig(source_path=args.source_path))
    print(f"The total number of characters: {total_chars}")


def handle_strip_whitespaces(args) -> None:
    config = StripWhitespacesConfig(
        source_path=args.source_path,
        target_path=resolve_target(args.target_path, STRIPPED_TEXT_TARGET),
    )
    operations.run_strip_whitespaces(config)
    print(f"Saved to {config.target_path}")


def handle_replace_enters(args) -> None:
    config = ReplaceEntersConfig(
        source_path=args.source_path,
        target_path=resolve_target(args.target_path, REPLACED_ENTERS_TARGET),
    )
    operations.run_replace_enters(config)
    print(f"Saved to {config.target_path}")


def handle_remove_matching_lines(args) -> None:
    config = RemoveMatchingLinesConfig(
        source_path=args.source_path,
        regex=args.regex,
        target_path=resolve_target(args.target_path, REMOVED_LINES_TARGET),
    )
    removed = operations.run_remove_matching_lines(config)
    print(f"Removed {removed} lines, saved to {config.target_path}")


def handle_tutorial(args) -> None:
    config = TutorialConfig(
        query=args.query,
        file_path=args.file_path,
        ignore_case=args.ignore_case,
    )
    for line in operations.run_tutorial(config):
        print(line)


# =============================================================================
# ARGUMENT PARSER
# =============================================================================

def _add_target_path(parser, default: str) -> None:
    parser.add_argument('--target-path', '-o', dest='target_path',
                        help=f'the (optional) path for the output file (default: {default})')


def _add_grid_options(parser, with_gamma: bool = True) -> None:
    parser.add_argument('--grid-size', '-g', type=int, default=DEFAULT_GRID_SIZE,
                        help='sub-cells per pixel along each axis')
    if with_gamma:
        parser.add_argument('--gamma', type=float, default=DEFAULT_GAMMA,
                            help='exponent applied to pixel darkness (lower is darker)')


def create_argument_parser():
    """Create command line argument parser."""
    import argparse

    parser = argparse.ArgumentParser(
        prog='book-pictures',
        description='Make pictures out of the characters of a book',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Examples:
  %(prog)s to_grid_image face.png -g 4 --gamma 0.8
  %(prog)s find_distribution face.png book.txt -g 4
  %(prog)s create_custom_image face.png book.txt -g 4 --gamma 0.62
  %(prog)s process-text strip-whitespaces book.txt -o compact.txt
  %(prog)s process-text remove-matching-lines book.txt '^Chapter'

Set {LOG_LEVEL_ENV}=debug (or pass -v) for progress messages.
        """
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose output')

    commands = parser.add_subparsers(dest='command', metavar='command')
    commands.required = True

    # Image commands
    sub = commands.add_parser('to_black_and_white',
                              help='generate a black and white picture based on the source picture')
    sub.add_argument('source_path', help='the path to the source picture')
    _add_target_path(sub, BLACK_AND_WHITE_TARGET)
    sub.set_defaults(handler=handle_to_black_and_white)

    sub = commands.add_parser('to_grid_image',
                              help='generate a halftone grid picture of black and white pixels')
    sub.add_argument('source_path', help='the path to the source picture')
    _add_target_path(sub, PIXEL_GRID_TARGET)
    _add_grid_options(sub)
    sub.set_defaults(handler=handle_generate_grid)

    sub = commands.add_parser('find_distribution',
                              help='find the gamma that makes a text fill the grid of a picture')
    sub.add_argument('img_source_path', help='the path to the source picture')
    sub.add_argument('text_source_path', help='the path to the source text')
    _add_grid_options(sub, with_gamma=False)
    sub.set_defaults(handler=handle_find_distribution)

    sub = commands.add_parser('create_custom_image',
                              help='draw the grid of a picture with the characters of a text (SVG)')
    sub.add_argument('img_source_path', help='the path to the source picture')
    sub.add_argument('text_source_path', help='the path to the source text')
    _add_target_path(sub, CUSTOM_IMAGE_TARGET)
    _add_grid_options(sub)
    sub.set_defaults(handler=handle_create_custom_image)

    # Text commands
    text = commands.add_parser('process-text', help='pre-process a txt file')
    text_commands = text.add_subparsers(dest='text_command', metavar='task')
    text_commands.required = True

    sub = text_commands.add_parser('length', help='count the characters of a text')
    sub.add_argument('source_path', help='the path to the source text')
    sub.set_defaults(handler=handle_text_length)

    sub = text_commands.add_parser('strip-whitespaces', help='remove every whitespace character')
    sub.add_argument('source_path', help='the path to the source text')
    _add_target_path(sub, STRIPPED_TEXT_TARGET)
    sub.set_defaults(handler=handle_strip_whitespaces)

    sub = text_commands.add_parser('replace-enters', help='replace line breaks with spaces')
    sub.add_argument('source_path', help='the path to the source text')
    _add_target_path(sub, REPLACED_ENTERS_TARGET)
    sub.set_defaults(handler=handle_replace_enters)

    sub = text_commands.add_parser('remove-matching-lines',
                                   help='remove the lines matching a regular expression')
    sub.add_argument('source_path', help='the path to the source text')
    sub.add_argument('regex', help='the regular expression lines are matched against')
    _add_target_path(sub, REMOVED_LINES_TARGET)
    sub.set_defaults(handler=handle_remove_matching_lines)

    # Tutorial
    sub = commands.add_parser('tutorial', help='print the lines of a file containing a query')
    sub.add_argument('query', help='the searched string')
    sub.add_argument('file_path', help='the target file')
    sub.add_argument('--ignore-case', '-i', action='store_true', help='should ignore case?')
    sub.set_defaults(handler=handle_tutorial)

    return parser


# =============================================================================
# ENTRY POINT
# =============================================================================

def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else log_level_from_env()
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for command line usage."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)
    logger.debug("Parsed configuration: %s", vars(args))

    try:
        args.handler(args)
    except BookPicturesError as e:
        print(f"Application error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
