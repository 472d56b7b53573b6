from abc import ABC, abstractmethod
from typing import Iterator

from lz78_encoding.factor import Phrase
from lz78_encoding.input_buffer import InputBuffer


class PhraseDictionary(ABC):
    """
    Interface for the LZ78 phrase dictionary.

    A dictionary maps phrase text to a dense id (1, 2, 3, ...). The empty
    phrase with id 0 always exists implicitly. Phrases are only ever added,
    each one extending an existing phrase by a single byte.
    """

    @abstractmethod
    def extend_match(self, data: memoryview, position: int) -> tuple[int, int]:
        """
        Finds the longest phrase that is a prefix of data[position:].

        Args:
            data: Read-only view of the whole input
            position: Index of the first unconsumed byte

        Returns:
            Tuple (matched_length, matched_id); (0, 0) when no phrase
            starts with data[position]
        """
        pass

    @abstractmethod
    def insert(self, parent_id: int, char: int) -> int:
        """
        Adds the phrase text(parent_id) + char.

        Args:
            parent_id: Id of the phrase being extended (0 for the empty phrase)
            char: Byte value appended to the parent text

        Returns:
            Id of the new phrase
        """
        pass

    @abstractmethod
    def phrase(self, phrase_id: int) -> Phrase:
        """
        Returns the record for phrase_id. Raises KeyError for unknown ids.
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        """Number of phrases, not counting the empty one."""
        pass

    @classmethod
    def from_buffer(cls, buffer: InputBuffer) -> "PhraseDictionary":
        """
        Builds an empty dictionary suited to the given input.

        Args:
            buffer: The input that is about to be encoded

        Returns:
            New empty dictionary
        """
        return cls()

    def text(self, phrase_id: int) -> bytes:
        """
        Rebuilds the phrase text by following parent links back to the root.
        """
        chars = bytearray()
        while phrase_id:
            record = self.phrase(phrase_id)
            chars.append(record.char)
            phrase_id = record.parent
        chars.reverse()
        return bytes(chars)

    def _check_id(self, phrase_id: int) -> None:
        if not 0 < phrase_id <= len(self):
            raise KeyError(phrase_id)

    def __iter__(self) -> Iterator[Phrase]:
        for phrase_id in range(1, len(self) + 1):
            yield self.phrase(phrase_id)

    def __repr__(self):
        return f"<{type(self).__name__} phrases={len(self)}>"
