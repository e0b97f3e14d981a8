"""Text rendering of the category forest."""

from collections import defaultdict

from categorytree.database.base import Database
from categorytree.domain.entities import Category
from categorytree.domain.errors import EmptyTreeError

TREE_HEADING = "Category tree:"
INDENT = "  "
BULLET = "- "


class TreeRenderer:
    """Renders the whole forest as an indented outline."""

    def __init__(self, db: Database):
        """Initialize tree renderer.

        Args:
            db: Database instance
        """
        self.db = db

    def render_tree(self) -> str:
        """Render every root and its descendants, depth-first.

        Output looks like::

            Category tree:
            - Parent
              - Child 1
              - Child 2
            - Other parent

        Sibling order is the store's order.

        Raises:
            EmptyTreeError: If there are no root categories
        """
        roots = self.db.find_all_by_parent_is_null()
        if not roots:
            raise EmptyTreeError()

        children: dict[int, list[Category]] = defaultdict(list)
        for category in self.db.find_all():
            if category.parent_id is not None:
                children[category.parent_id].append(category)

        lines = [TREE_HEADING]
        # Explicit stack instead of recursion; children are pushed reversed so
        # they pop in store order
        stack = [(root, 0) for root in reversed(roots)]
        while stack:
            category, depth = stack.pop()
            lines.append(f"{INDENT * depth}{BULLET}{category.name}")
            for child in reversed(children.get(category.id, [])):
                stack.append((child, depth + 1))

        return "\n".join(lines) + "\n"
