"""
Diagnostic rendering: {L1,L2,...|R1,R2,...}

Purely structural. Labels are not shown and the output carries no meaning
for identity or equality; it follows the store's option order.
"""

from __future__ import annotations
from typing import Dict, List

from .store import GameNode


def render(node: GameNode) -> str:
    """{L|R} form of a node; shared sub-positions are formatted once."""
    memo: Dict[GameNode, str] = {}
    stack: List[GameNode] = [node]

    # Post-order on an explicit stack, so tall trees need no recursion
    while stack:
        current = stack[-1]
        if current in memo:
            stack.pop()
            continue
        pending = [option for option in current.left + current.right if option not in memo]
        if pending:
            stack.extend(pending)
            continue
        stack.pop()
        left = ",".join(memo[option] for option in current.left)
        right = ",".join(memo[option] for option in current.right)
        memo[current] = "{" + left + "|" + right + "}"

    return memo[node]
