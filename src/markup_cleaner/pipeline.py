# -*- coding: utf-8 -*-
"""
Markup normalization pipeline.

Turns editor-produced HTML (Word, Google Docs, arbitrary pastes) into a
minimal semantic fragment. Steps run in a fixed order on one parsed tree:
1. Tree Sanitizer - strip attributes/comments, heading markers, span emphasis
2. List Item Normalizer - unwrap <p> in <li>, emphasize "Label:" prefixes
3. Empty Element Pruner - drop elements without content or useful attributes
4. Auto-Linker - hyperlink phone numbers and email addresses

A step that raises is skipped: the tree is restored to its state before the
step and the remaining steps still run.

Display formatting (beautify/minify) lives in formatter.py and runs on the
serialized result only.
"""
import copy
import logging
from dataclasses import dataclass, field
from typing import Callable

from bs4 import Tag

from .autolinker import auto_link
from .config import settings
from .dom import parse, serialize
from .list_items import normalize_list_items
from .pruner import prune_empty_elements
from .sanitizer import sanitize_tree

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Result of the normalization pipeline."""

    markup: str
    steps_applied: list[str] = field(default_factory=list)


class NormalizationPipeline:
    """
    Normalization pipeline over a private BeautifulSoup tree.

    The pipeline keeps no state between calls; each call parses its own tree.
    Steps 2-4 can be disabled via configuration.
    """

    def process(self, markup: str) -> PipelineResult:
        """
        Normalize markup.

        Args:
            markup: Raw HTML fragment or document

        Returns:
            PipelineResult with the trimmed fragment and the steps applied
        """
        result = PipelineResult(markup="")

        if not markup or not markup.strip():
            return result

        soup, root = parse(markup)

        # Step 1: Tree Sanitizer (always active)
        self._apply(result, root, "sanitize", sanitize_tree, soup, root)

        # Step 2: List Item Normalizer
        if settings.ENABLE_LIST_ITEM_NORMALIZATION:
            self._apply(result, root, "list_items", normalize_list_items, soup, root)

        # Step 3: Empty Element Pruner
        if settings.ENABLE_EMPTY_PRUNING:
            self._apply(result, root, "prune_empty", prune_empty_elements, root)

        # Step 4: Auto-Linker (needs the final text layout)
        if settings.ENABLE_AUTO_LINKING:
            self._apply(result, root, "auto_link", auto_link, soup, root)

        result.markup = serialize(root)
        logger.debug(
            "Normalization done",
            extra={
                "input_length": len(markup),
                "output_length": len(result.markup),
                "steps_applied": result.steps_applied,
            },
        )
        return result

    @staticmethod
    def _apply(result: PipelineResult, root: Tag, name: str, step: Callable, *args) -> None:
        """Run one step; on failure put the tree back and leave the step out."""
        backup = copy.copy(root)
        try:
            step(*args)
        except Exception as e:
            logger.warning(
                "Normalization step failed, skipped",
                extra={"stage": name, "error": str(e)},
            )
            root.clear()
            root.extend(list(backup.contents))
            return
        result.steps_applied.append(name)


# Global pipeline instance
normalization_pipeline = NormalizationPipeline()


def normalize(markup: str) -> str:
    """Run the full pipeline and return the clean fragment."""
    return normalization_pipeline.process(markup).markup
