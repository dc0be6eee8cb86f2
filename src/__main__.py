#!/usr/bin/env python3
"""
wikiterm - Wiki articles as styled console text

Retrieves the summary, the table of contents or a named section of a wiki
article from a MediaWiki API and prints it as styled text in the terminal.

Philosophy:
    - Console-first: bold, italic, underline and inline code survive as
      terminal styling
    - One request, one answer: no caching, no retries
    - Uniform failure: any problem retrieving content is reported the same way

Usage:
    wikiterm PAGE [SECTION]

    SECTION is "summary" (default), "toc", or a section anchor/number taken
    from the table of contents.

Examples:
    # Lead summary
    wikiterm Diamond

    # Table of contents
    wikiterm Diamond toc

    # A section by anchor or number
    wikiterm Diamond Obtaining
    wikiterm Diamond 2.1

    # Verbose output (request URLs)
    wikiterm Diamond -v
"""

import sys
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter
from typing import List, Optional

from .config import appsettings
from .lib import (
    ConsoleRenderer,
    Theme,
    ThemeError,
    WikiContentUnavailable,
    WikiRetriever,
    __version__,
    LOG,
    lines_split,
    state_connectToLogger,
    themes_listAvailable,
    toc_format,
    tocAffordance_make,
)
from .models import ProgramState, TOC, pipeline, sectionQuery_parse


FAILED_MESSAGE = "Error: failed to retrieve wiki content"

# Define CLI arguments
parser = ArgumentParser(
    prog="wikiterm",
    description="wikiterm - Wiki articles as styled console text",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument("page", type=str, help="Wiki page title")

parser.add_argument(
    "section",
    nargs="?",
    default="summary",
    type=str,
    help='"summary", "toc", or a section anchor or number',
)

parser.add_argument(
    "--theme",
    default=appsettings.theme_name,
    type=str,
    help="Console theme used to render styles",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def request_parse(inputstate: ProgramState) -> ProgramState:
    """
    Interpret the section argument.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added field:
            - query: Summary(), TOC() or BySectionIdentifier(...)
    """
    state = inputstate.copy()
    state.query = sectionQuery_parse(state.section)
    LOG(f"Page '{state.page}', query {state.query!r}", level=2)
    return state


def content_retrieve(inputstate: ProgramState) -> ProgramState:
    """
    Fetch and decode the requested content.

    Args:
        inputstate: Program state with query set

    Returns:
        ProgramState with added fields:
            - content: Decoded text (summary and section queries)
            - tocEntries: Table of contents (TOC queries)
            - retrieveOK: True once content is available

    Exits:
        1 if the content could not be retrieved
    """
    state = inputstate.copy()

    retriever = WikiRetriever()
    try:
        if isinstance(state.query, TOC):
            state.tocEntries = retriever.toc_retrieve(state.page)
            LOG(f"Retrieved {len(state.tocEntries)} TOC entries", level=2)
        else:
            state.content = retriever.content_retrieve(state.page, state.query)
            LOG(f"Retrieved {len(state.content)} characters", level=2)
    except WikiContentUnavailable as e:
        LOG(f"Content unavailable for '{e}'", level=2)
        print(FAILED_MESSAGE, file=sys.stderr)
        sys.exit(1)

    state.retrieveOK = True
    return state


def lines_display(inputstate: ProgramState) -> ProgramState:
    """
    Print the retrieved content to the terminal.

    Content is split into display lines and followed by a pointer to the
    full table of contents; a TOC is printed one section per line.

    Args:
        inputstate: Program state with content or tocEntries

    Returns:
        ProgramState with added field:
            - displayedLines: Number of lines written

    Exits:
        1 if the theme cannot be loaded
    """
    state = inputstate.copy()

    try:
        renderer = ConsoleRenderer(Theme(state.theme))
    except ThemeError as e:
        print(f"Error: {e}", file=sys.stderr)
        print(f"Available themes: {', '.join(themes_listAvailable())}", file=sys.stderr)
        sys.exit(1)

    if state.tocEntries is not None:
        lines = toc_format(state.tocEntries)
    else:
        lines = lines_split(state.content or "")
        lines.append(tocAffordance_make(state.page))

    state.displayedLines = renderer.lines_write(lines)
    return state


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main entry point - retrieve and display wiki content.

    Orchestrates the pipeline:
        1. request_parse: Interpret the section argument
        2. content_retrieve: Fetch and decode
        3. lines_display: Render to the terminal

    Args:
        argv: Command-line arguments (default: sys.argv[1:])
    """
    options: Namespace = parser.parse_args(argv)

    state: ProgramState = ProgramState.state_createFromNamespace(options)

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    # Execute retrieval pipeline
    pipeline(state, request_parse, content_retrieve, lines_display)


if __name__ == "__main__":
    main()
