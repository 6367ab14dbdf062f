"""Opcode index for anchoring fuzzy alignment.

The index maps each opcode to the ordered positions at which it occurs in
one instruction sequence. It is built per comparison and thrown away after.
"""

from collections import defaultdict
from collections.abc import Hashable, Sequence


class OpcodeIndex:
    """Inverted index from opcode to positions in a single opcode sequence.

    Attributes:
        positions: Mapping opcode -> ascending list of positions
    """

    def __init__(self, opcodes: Sequence[Hashable]) -> None:
        """Build the index.

        Args:
            opcodes: Opcode sequence of the indexed method body
        """
        self.positions: dict[Hashable, list[int]] = defaultdict(list)
        for position, opcode in enumerate(opcodes):
            self.positions[opcode].append(position)

    def __contains__(self, opcode: Hashable) -> bool:
        return opcode in self.positions

    def __len__(self) -> int:
        """Return the number of distinct opcodes."""
        return len(self.positions)

    def lookup(self, opcode: Hashable) -> list[int]:
        """Return the positions of ``opcode``, or an empty list if absent."""
        # .get avoids inserting empty buckets through the defaultdict
        return self.positions.get(opcode, [])
