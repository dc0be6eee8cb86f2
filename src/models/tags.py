"""
Tag specification model

Defines the structure of the HTML tags understood by the markup decoder, for
dispatch and registry management.
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from .markup import DecoderState, Transition


TagHandler = Callable[[DecoderState], Transition]


@dataclass
class TagSpec:
    """
    Specification for a decoded tag

    Attributes:
        name: Tag name (lower case, without brackets)
        opening: Handler for <tag>, or None if the opening tag has no effect
        closing: Handler for </tag>, or None if the closing tag has no effect
        aliases: Alternative tag names sharing both handlers
    """
    name: str
    opening: Optional[TagHandler] = None
    closing: Optional[TagHandler] = None
    aliases: List[str] = field(default_factory=list)

    def handler_get(self, closing: bool) -> Optional[TagHandler]:
        """Pick the opening or closing handler"""
        return self.closing if closing else self.opening
