"""Account tree algorithms.

Traversal runs in memory over the fully loaded account list. Every walk is
bounded by MAX_TRAVERSAL_HOPS.
"""

import logging
from collections import defaultdict
from typing import Iterable, Mapping, Optional

from wallet.domain.entities import Account, AccountTreeNode
from wallet.domain.errors import (
    CircularReferenceError,
    HierarchyTooDeepError,
    ParentAccountNotFoundError,
)

logger = logging.getLogger(__name__)

# Levels counted from the root (a root alone is one level).
MAX_HIERARCHY_DEPTH = 5
# Safety bound for ancestor walks; strictly greater than the depth limit.
MAX_TRAVERSAL_HOPS = 10

PATH_SEPARATOR = " > "


def placement_depth(
    accounts_by_id: Mapping[int, Account],
    parent_id: Optional[int],
    account_id: Optional[int] = None,
) -> int:
    """Return the 0-indexed depth a node would have under ``parent_id``.

    Walks from the candidate parent up to its root, counting hops.

    Args:
        accounts_by_id: Every known account keyed by ID
        parent_id: Candidate parent (None for a root)
        account_id: ID of the node being placed, if it already exists

    Raises:
        CircularReferenceError: If ``account_id`` is among the ancestors, or the
            chain does not reach a root within MAX_TRAVERSAL_HOPS
        ParentAccountNotFoundError: If a link in the chain is missing
        HierarchyTooDeepError: If the node would sit deeper than MAX_HIERARCHY_DEPTH
    """
    hops = 0
    current = parent_id
    while current is not None:
        if account_id is not None and current == account_id:
            raise CircularReferenceError(account_id)
        hops += 1
        if hops > MAX_TRAVERSAL_HOPS:
            raise CircularReferenceError(current)
        ancestor = accounts_by_id.get(current)
        if ancestor is None:
            raise ParentAccountNotFoundError(current)
        current = ancestor.parent_id

    if hops + 1 > MAX_HIERARCHY_DEPTH:
        logger.debug("Rejected placement under %s: %d levels", parent_id, hops + 1)
        raise HierarchyTooDeepError(depth=hops + 1, max_depth=MAX_HIERARCHY_DEPTH)
    return hops


def _children_map(accounts: Iterable[Account]) -> dict[Optional[int], list[Account]]:
    children: dict[Optional[int], list[Account]] = defaultdict(list)
    for account in accounts:
        children[account.parent_id].append(account)
    for siblings in children.values():
        siblings.sort(key=lambda acc: (acc.name, acc.id))
    return children


def build_tree(accounts: Iterable[Account], include_inactive: bool = False) -> list[AccountTreeNode]:
    """Pre-order depth-first listing from every root, children ordered by name.

    Inactive accounts, and everything beneath them, are skipped unless
    ``include_inactive`` is set.
    """
    children = _children_map(
        acc for acc in accounts if include_inactive or acc.is_active
    )
    result: list[AccountTreeNode] = []
    visited: set[int] = set()

    def visit(account: Account, level: int, parent_path: Optional[str]) -> None:
        if account.id in visited or level > MAX_TRAVERSAL_HOPS:
            raise CircularReferenceError(account.id)
        visited.add(account.id)
        path = account.name if parent_path is None else f"{parent_path}{PATH_SEPARATOR}{account.name}"
        result.append(AccountTreeNode(account=account, level=level, path=path))
        for child in children.get(account.id, []):
            visit(child, level + 1, path)

    for root in children.get(None, []):
        visit(root, 0, None)
    return result


def collect_descendant_ids(accounts: Iterable[Account], account_id: int) -> list[int]:
    """Return ``account_id`` followed by all of its transitive descendants."""
    children = _children_map(accounts)
    result = [account_id]
    seen = {account_id}
    frontier = [account_id]
    level = 0
    while frontier:
        level += 1
        if level > MAX_TRAVERSAL_HOPS:
            raise CircularReferenceError(account_id)
        next_frontier = []
        for parent in frontier:
            for child in children.get(parent, []):
                if child.id in seen:
                    raise CircularReferenceError(child.id)
                seen.add(child.id)
                result.append(child.id)
                next_frontier.append(child.id)
        frontier = next_frontier
    return result


def account_path(accounts_by_id: Mapping[int, Account], account_id: int) -> str:
    """Breadcrumb of ancestor names, e.g. ``Assets > BoursoBank > Compte Courant``."""
    parts = []
    current: Optional[int] = account_id
    while current is not None:
        if len(parts) > MAX_TRAVERSAL_HOPS:
            raise CircularReferenceError(account_id)
        account = accounts_by_id.get(current)
        if account is None:
            break
        parts.append(account.name)
        current = account.parent_id
    return PATH_SEPARATOR.join(reversed(parts))
