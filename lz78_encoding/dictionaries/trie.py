"""
Trie based LZ78 dictionaries.

Every node of the trie is a phrase and every edge is one byte, so a lookup
costs one transition per input byte no matter how large the dictionary is.
"""
import logging

import numpy as np

from lz78_encoding.dictionaries.phrase_dictionary_ABC import PhraseDictionary
from lz78_encoding.factor import Phrase
from lz78_encoding.input_buffer import InputBuffer

logger = logging.getLogger(__name__)


class TrieDictionary(PhraseDictionary):
    """
    Trie with a sparse child map per node, indexed by phrase id.
    Works for any byte value without scanning the input first.
    """

    def __init__(self):
        # node 0 is the root (empty phrase)
        self._children: list[dict[int, int]] = [{}]
        self._parents: list[int] = [0]
        self._chars: list[int] = [0]

    def extend_match(self, data: memoryview, position: int) -> tuple[int, int]:
        end = len(data)
        node = 0
        length = 0
        while position + length < end:
            child = self._children[node].get(data[position + length])
            if child is None:
                break
            node = child
            length += 1
        return length, node

    def insert(self, parent_id: int, char: int) -> int:
        if not 0 <= parent_id < len(self._children):
            raise KeyError(parent_id)
        transitions = self._children[parent_id]
        if char in transitions:
            raise ValueError(
                f"Phrase {parent_id}+{char} is already stored as id {transitions[char]}"
            )
        new_id = len(self._children)
        transitions[char] = new_id
        self._children.append({})
        self._parents.append(parent_id)
        self._chars.append(char)
        return new_id

    def phrase(self, phrase_id: int) -> Phrase:
        self._check_id(phrase_id)
        return Phrase(phrase_id, self._parents[phrase_id], self._chars[phrase_id])

    def __len__(self):
        return len(self._children) - 1


class DenseTrieDictionary(PhraseDictionary):
    """
    Trie with a fixed-width child table.

    Row i holds the children of phrase i, column j the child reached by
    byte min_byte + j; 0 marks a missing child since the root is never a
    child. Memory is alphabet_size * capacity ints, the table doubles
    when it runs out of rows.
    """

    INITIAL_CAPACITY = 64

    def __init__(self, alphabet_range: tuple[int, int] = (0, 255)):
        """
        :param alphabet_range: (min, max) byte values the trie has to hold
        """
        low, high = alphabet_range
        if not 0 <= low <= high <= 255:
            raise ValueError(f"Invalid alphabet range: {low}..{high}")
        self.low = low
        self.high = high
        self._table = np.zeros((self.INITIAL_CAPACITY, high - low + 1), dtype=np.int32)
        self._parents: list[int] = [0]
        self._chars: list[int] = [0]

    @classmethod
    def from_buffer(cls, buffer: InputBuffer) -> "DenseTrieDictionary":
        alphabet_range = buffer.alphabet_range
        if alphabet_range is None:
            # empty input, nothing will ever be inserted
            alphabet_range = (0, 0)
        return cls(alphabet_range)

    @property
    def alphabet_size(self) -> int:
        return self.high - self.low + 1

    @property
    def capacity(self) -> int:
        """Rows currently allocated in the child table."""
        return self._table.shape[0]

    def extend_match(self, data: memoryview, position: int) -> tuple[int, int]:
        end = len(data)
        node = 0
        length = 0
        while position + length < end:
            key = data[position + length] - self.low
            if not 0 <= key < self.alphabet_size:
                break
            child = int(self._table[node, key])
            if not child:
                break
            node = child
            length += 1
        return length, node

    def insert(self, parent_id: int, char: int) -> int:
        if not 0 <= parent_id < len(self._parents):
            raise KeyError(parent_id)
        key = char - self.low
        if not 0 <= key < self.alphabet_size:
            raise ValueError(
                f"Byte {char} is outside the trie alphabet {self.low}..{self.high}"
            )
        existing = int(self._table[parent_id, key])
        if existing:
            raise ValueError(f"Phrase {parent_id}+{char} is already stored as id {existing}")

        new_id = len(self._parents)
        if new_id >= self.capacity:
            self._table = np.concatenate((self._table, np.zeros_like(self._table)))
            logger.debug("dense trie grown to %d rows", self.capacity)

        self._table[parent_id, key] = new_id
        self._parents.append(parent_id)
        self._chars.append(char)
        return new_id

    def phrase(self, phrase_id: int) -> Phrase:
        self._check_id(phrase_id)
        return Phrase(phrase_id, self._parents[phrase_id], self._chars[phrase_id])

    def __len__(self):
        return len(self._parents) - 1
