"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing retrieval stages.
"""

from argparse import Namespace
from typing import Optional, Type, TypeVar, List, Callable
from dataclasses import dataclass, field

from .wiki import SectionQuery, Summary, TOCEntry


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the retrieval pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the request progresses.

    Pipeline stages and their state additions:
        - Initial: page, section, verbosity, theme
        - request_parse: query
        - content_retrieve: content or tocEntries, retrieveOK
        - lines_display: displayedLines (terminal stage)

    Attributes:
        page: Wiki page title as typed by the user
        section: Raw section argument ("summary", "toc", anchor or number)
        verbosity: Logging verbosity level (1-3)
        theme: Console theme name
        query: Parsed section query
        content: Decoded content (summary or section)
        tocEntries: Table of contents (for TOC queries)
        retrieveOK: Content was retrieved
        displayedLines: Number of lines written to the console
    """

    # CLI arguments
    page: str = field(default="")
    section: str = field(default="summary")
    verbosity: int = field(default=1)
    theme: str = field(default="default")

    # Pipeline state
    query: SectionQuery = field(default_factory=Summary)
    content: Optional[str] = field(default=None)
    tocEntries: Optional[List[TOCEntry]] = field(default=None)
    retrieveOK: bool = field(default=False)
    displayedLines: int = field(default=0)

    @classmethod
    def state_createFromNamespace(cls: Type["ProgramState"], options: Namespace) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace.

        Args:
            options: Parsed CLI arguments (page, section, verbosity, theme)

        Returns:
            ProgramState instance with all matching CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Only keep options that are ProgramState fields
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields and v is not None}

        return cls(**filtered_options)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            request_parse,
            content_retrieve,
            lines_display
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
