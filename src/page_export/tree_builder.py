"""Tree builder for ordering exported pages.

This module turns the flat list of pages returned by the content store into
the ordered page list of the mobile application. Pages are indexed by id,
grouped under their parent, sorted by menu_order within each parent and
walked depth-first, parent before children. A page that is not visible is
dropped together with its whole subtree, and the survivors are numbered
1..N without gaps.
"""

import logging
from typing import Dict, Iterable, List, Optional, Set

from src.content_store.models import Page, ROOT_PARENT_ID
from .errors import PageTreeCycleError
from .models import TreeEntry
from .visibility import VisibilityPolicy

logger = logging.getLogger(__name__)


class PageTreeBuilder:
    """Builds the ordered, pruned page list from a flat page list.

    Example:
        >>> builder = PageTreeBuilder(VisibilityPolicy(inactive_ids={7}))
        >>> entries = builder.build(store.list_pages('page'))
        >>> [(entry.page.title, entry.order) for entry in entries]
        [('Home', 1), ('About', 2)]
    """

    def __init__(self, policy: Optional[VisibilityPolicy] = None):
        """Initialize the builder.

        Args:
            policy: Visibility rule applied to every page (nothing hidden if omitted)
        """
        self._policy = policy or VisibilityPolicy()

    def build(self, pages: Iterable[Page]) -> List[TreeEntry]:
        """Order, prune and number the pages.

        Args:
            pages: Candidate pages in retrieval order

        Returns:
            List of TreeEntry in traversal order; entry.order equals its
            1-based list position

        Raises:
            PageTreeCycleError: If parent references form a cycle
        """
        arena = self._index_pages(pages)
        if not arena:
            return []

        parents = self._resolve_parents(arena)
        children = self._group_children(arena, parents)
        self._check_reachable(arena, children)

        entries: List[TreeEntry] = []
        visited: Set[int] = set()
        # Stack holds ids still to visit; reversed so the first sibling pops first
        stack = list(reversed(children.get(ROOT_PARENT_ID, [])))

        while stack:
            page_id = stack.pop()
            if page_id in visited:
                raise PageTreeCycleError([page_id])
            visited.add(page_id)

            page = arena[page_id]
            if not self._policy.is_visible(page):
                logger.debug(
                    f"Pruning page {page_id} ('{page.title}') and its "
                    f"{self._count_descendants(page_id, children)} descendant(s)"
                )
                continue

            entries.append(TreeEntry(page=page, order=len(entries) + 1, parent_id=parents[page_id]))
            stack.extend(reversed(children.get(page_id, [])))

        logger.info(f"Page tree: {len(entries)} of {len(arena)} page(s) exported")
        return entries

    def _index_pages(self, pages: Iterable[Page]) -> Dict[int, Page]:
        """Index pages by id, keeping retrieval order and the first of any duplicates."""
        arena: Dict[int, Page] = {}
        for page in pages:
            if page.page_id in arena:
                logger.warning(f"Duplicate page id {page.page_id} ignored")
                continue
            arena[page.page_id] = page
        return arena

    def _resolve_parents(self, arena: Dict[int, Page]) -> Dict[int, int]:
        """Map each page to its effective parent; unknown parents and self-references become the root."""
        parents: Dict[int, int] = {}
        for page_id, page in arena.items():
            parent_id = page.parent_id or ROOT_PARENT_ID
            if parent_id == page_id:
                logger.debug(f"Page {page_id} is its own parent, treating it as a root page")
                parent_id = ROOT_PARENT_ID
            elif parent_id != ROOT_PARENT_ID and parent_id not in arena:
                logger.debug(
                    f"Page {page_id} references missing parent {parent_id}, treating it as a root page"
                )
                parent_id = ROOT_PARENT_ID
            parents[page_id] = parent_id
        return parents

    def _group_children(self, arena: Dict[int, Page], parents: Dict[int, int]) -> Dict[int, List[int]]:
        """Group page ids under their parent, sorted by menu_order.

        sorted() is stable, so pages with equal menu_order keep retrieval order.
        """
        children: Dict[int, List[int]] = {}
        for page_id in arena:
            children.setdefault(parents[page_id], []).append(page_id)

        for parent_id, child_ids in children.items():
            children[parent_id] = sorted(child_ids, key=lambda child_id: arena[child_id].menu_order)
        return children

    def _check_reachable(self, arena: Dict[int, Page], children: Dict[int, List[int]]) -> None:
        """Every page must descend from the root; the rest sit on a parent cycle."""
        reachable: Set[int] = set()
        stack = list(children.get(ROOT_PARENT_ID, []))
        while stack:
            page_id = stack.pop()
            if page_id in reachable:
                continue
            reachable.add(page_id)
            stack.extend(children.get(page_id, []))

        unreachable = set(arena) - reachable
        if unreachable:
            logger.error(f"Parent cycle detected between pages {sorted(unreachable)}")
            raise PageTreeCycleError(unreachable)

    @staticmethod
    def _count_descendants(page_id: int, children: Dict[int, List[int]]) -> int:
        count = 0
        stack = list(children.get(page_id, []))
        while stack:
            count += 1
            stack.extend(children.get(stack.pop(), []))
        return count
