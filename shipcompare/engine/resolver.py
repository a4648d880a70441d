"""Path-addressed access into ship attribute trees."""

from typing import Any, Optional

from shipcompare.models.modifiers import AttributePath


class AttributeResolver:
    """Reads and writes numeric leaves of a ship attribute tree."""

    @staticmethod
    def read(tree: dict[str, Any], path: AttributePath) -> Optional[Any]:
        """
        Read the value at a path.

        Args:
            tree: Ship attribute tree
            path: Top-level or one-level nested path

        Returns:
            The stored value, None if the field or its group is missing
        """
        if not path.is_nested:
            return tree.get(path.field)
        group = tree.get(path.group)
        if not isinstance(group, dict):
            return None
        return group.get(path.field)

    @staticmethod
    def write(tree: dict[str, Any], path: AttributePath, value: Any) -> None:
        """
        Write a value at a path.

        Writing into a stat group the ship does not have (e.g. ``pump``) does nothing.

        Args:
            tree: Ship attribute tree, modified in place
            path: Top-level or one-level nested path
            value: New value
        """
        if not path.is_nested:
            tree[path.field] = value
            return
        group = tree.get(path.group)
        if isinstance(group, dict):
            group[path.field] = value
