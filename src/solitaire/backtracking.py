"""
Generic depth-first backtracking
-----

The solver knows nothing about chess. Any node type that can list its successors and tell whether it is a goal can be searched.
Every successor owns its own state, so backtracking never needs to undo anything.
"""

from typing import Optional, Protocol, Self, Sequence, TypeVar

from loguru import logger


class Configuration(Protocol):
    """Just the parts the backtracker needs"""

    def get_successors(self) -> Sequence[Self]: ...
    def is_goal(self) -> bool: ...


C = TypeVar("C", bound=Configuration)


class Backtracker:
    """
    Exhaustive depth-first search over a tree of configurations.

    ---
    Children are explored in the order `get_successors()` returns them, and the search stops at the first goal found.
    No visited-set: a configuration reachable along two different branches gets explored twice.
    """

    def __init__(self) -> None:
        self.nodes_explored = 0

    def solve(self, root: Configuration) -> bool:
        """Is a goal reachable from `root`?"""
        self.nodes_explored = 0
        found = self._solve(root)
        logger.debug(
            f"Search finished ({'goal found' if found else 'no solution'}) after {self.nodes_explored} configurations."
        )
        return found

    def solve_with_path(self, root: C) -> Optional[list[C]]:
        """
        Path of configurations from `root` (included, first element) to the first goal found (included, last element).

        Returns None when the whole tree gets exhausted without reaching a goal.
        """
        self.nodes_explored = 0
        path: list[C] = []
        found = self._solve_with_path(root, path)
        logger.debug(
            f"Search finished ({'goal found' if found else 'no solution'}) after {self.nodes_explored} configurations."
        )
        return path if found else None

    def _solve(self, config: Configuration) -> bool:
        self.nodes_explored += 1
        if config.is_goal():
            return True
        return any(self._solve(child) for child in config.get_successors())

    def _solve_with_path(self, config: C, path: list[C]) -> bool:
        self.nodes_explored += 1
        path.append(config)
        if config.is_goal():
            return True
        for child in config.get_successors():
            if self._solve_with_path(child, path):
                return True
        # dead end: backtrack
        path.pop()
        return False
