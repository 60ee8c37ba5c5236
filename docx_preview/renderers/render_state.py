"""
Per-render state.

Everything the HTML renderer mutates while walking the document lives in a
``RenderState`` created for one render pass and threaded through the render
calls. Two renders never share a state.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Dict, List, Optional, Set

from ..models.nodes import DocxElement
from ..models.section import ParagraphTab
from ..package.part import Part
from .html_node import HtmlElement

logger = logging.getLogger(__name__)


@dataclass
class CellPosition:
    col: int = 0
    row: int = 0


@dataclass
class PendingTab:
    """A rendered tab waiting for the tab-stop estimate."""

    span: HtmlElement
    node: DocxElement
    paragraph: Optional[DocxElement]
    stops: Optional[List[ParagraphTab]]
    line_width: Optional[float] = None


@dataclass
class RenderState:
    """Mutable state of one render pass."""

    style_container: Optional[HtmlElement] = None
    current_part: Optional[Part] = None
    line_width: Optional[float] = None

    vertical_merge: Dict[int, Optional[HtmlElement]] = field(default_factory=dict)
    cell_position: CellPosition = field(default_factory=CellPosition)
    _merge_stack: List[Dict[int, Optional[HtmlElement]]] = field(default_factory=list)
    _position_stack: List[CellPosition] = field(default_factory=list)

    footnote_ids: List[str] = field(default_factory=list)
    endnote_ids: List[str] = field(default_factory=list)
    used_header_footer_parts: Set[str] = field(default_factory=set)

    tabs: List[PendingTab] = field(default_factory=list)
    tasks: List["asyncio.Future"] = field(default_factory=list)

    def enter_table(self) -> None:
        self._merge_stack.append(self.vertical_merge)
        self._position_stack.append(self.cell_position)
        self.vertical_merge = {}
        self.cell_position = CellPosition()

    def leave_table(self) -> None:
        self.vertical_merge = self._merge_stack.pop()
        self.cell_position = self._position_stack.pop()

    def schedule(self, coro: Awaitable) -> "asyncio.Future":
        """
        Run a resource coroutine alongside the render pass.

        Must be called while an event loop is running.
        """
        task = asyncio.ensure_future(coro)
        self.tasks.append(task)
        return task

    async def join(self) -> None:
        """Wait for every scheduled task, including tasks scheduled while waiting."""
        done = 0
        while done < len(self.tasks):
            pending = self.tasks[done:]
            done = len(self.tasks)
            await asyncio.gather(*pending)
        logger.debug(f"Joined {done} resource tasks")
