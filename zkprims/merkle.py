"""Complete binary Merkle tree over elliptic-curve points."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from .errors import ProofError
from .hashing import DEFAULT_HASH, HashAlgorithm, HashChain
from .ristretto import Point


def _leaf_hash(point: Point, algorithm: HashAlgorithm) -> bytes:
    return HashChain(algorithm).chain_point(point).result_bytes()


def _merge(left: bytes, right: bytes, algorithm: HashAlgorithm) -> bytes:
    return HashChain(algorithm).chain_bytes(left).chain_bytes(right).result_bytes()


def _sibling(index: int) -> int:
    return 0 if index == 0 else ((index + 1) ^ 1) - 1


def _parent(index: int) -> int:
    return (index - 1) >> 1


def _is_left(index: int) -> bool:
    return index & 1 == 1


@dataclass
class MerkleProof:
    """Membership proof for one point; index is its position in the node array."""

    index: int
    lemmas: list[bytes]
    point: Point
    algorithm: HashAlgorithm = field(default=DEFAULT_HASH, compare=False, repr=False)

    def _compute_root(self, leaf: bytes) -> Optional[bytes]:
        queue: deque[tuple[int, bytes]] = deque([(self.index, leaf)])
        lemmas = iter(self.lemmas)
        while queue:
            index, node = queue.popleft()
            if index == 0:
                if next(lemmas, None) is None and not queue:
                    return node
                return None
            if queue and queue[0][0] == _sibling(index):
                sibling: Optional[bytes] = queue.popleft()[1]
            else:
                sibling = next(lemmas, None)
            if sibling is None:
                continue
            if _is_left(index):
                parent_node = _merge(node, sibling, self.algorithm)
            else:
                parent_node = _merge(sibling, node, self.algorithm)
            queue.append((_parent(index), parent_node))
        return None

    def verify(self, root: bytes) -> None:
        """Raise ProofError unless the proof leads from the point to root."""
        leaf = _leaf_hash(self.point, self.algorithm)
        if self._compute_root(leaf) != root:
            raise ProofError()


class MerkleTree256:
    """A complete binary Merkle tree whose leaves are hashed points."""

    def __init__(
        self, nodes: list[bytes], leaves: list[Point], algorithm: HashAlgorithm
    ) -> None:
        self._nodes = nodes
        self.leaves = leaves
        self.algorithm = algorithm

    @classmethod
    def create_tree(
        cls, leaves: list[Point], algorithm: HashAlgorithm = DEFAULT_HASH
    ) -> MerkleTree256:
        leaves = list(leaves)
        hashes = [_leaf_hash(leaf, algorithm) for leaf in leaves]
        if not hashes:
            return cls([], leaves, algorithm)
        nodes: list[bytes] = [b""] * (len(hashes) - 1) + hashes
        for i in reversed(range(len(hashes) - 1)):
            nodes[i] = _merge(nodes[2 * i + 1], nodes[2 * i + 2], algorithm)
        return cls(nodes, leaves, algorithm)

    def build_proof(self, point: Point) -> Optional[MerkleProof]:
        """Proof for the first leaf equal to point, or None if it is absent."""
        leaf_index = next((i for i, leaf in enumerate(self.leaves) if leaf == point), None)
        if leaf_index is None or not self._nodes:
            return None
        leaves_count = (len(self._nodes) >> 1) + 1
        tree_index = leaves_count + leaf_index - 1
        lemmas: list[bytes] = []
        queue: deque[int] = deque([tree_index])
        while queue:
            index = queue.popleft()
            if index == 0:
                break
            sibling = _sibling(index)
            if queue and queue[0] == sibling:
                queue.popleft()
            else:
                lemmas.append(self._nodes[sibling])
            parent = _parent(index)
            if parent != 0:
                queue.append(parent)
        return MerkleProof(tree_index, lemmas, point, self.algorithm)

    def root(self) -> bytes:
        """Root hash; an empty tree yields zero bytes of the digest size."""
        if self._nodes:
            return self._nodes[0]
        return bytes(HashChain(self.algorithm).digest_size)