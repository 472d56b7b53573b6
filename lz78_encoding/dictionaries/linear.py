"""
Unindexed LZ78 dictionary: an append-only list of phrases
searched from the newest entry back to the oldest.
"""
from lz78_encoding.dictionaries.phrase_dictionary_ABC import PhraseDictionary
from lz78_encoding.factor import Phrase


class LinearDictionary(PhraseDictionary):
    """
    Keeps every phrase text in insertion order. Lookups are O(n) in the
    number of phrases, inserts are O(1) plus the cost of copying the text.
    """

    def __init__(self):
        # Slot 0 is the empty phrase
        self._texts: list[bytes] = [b""]
        self._parents: list[int] = [0]

    def extend_match(self, data: memoryview, position: int) -> tuple[int, int]:
        end = len(data)
        if position >= end:
            return 0, 0
        first = data[position]

        # A prefix of a phrase is always older than the phrase itself,
        # so the newest full match is also the longest one.
        for phrase_id in range(len(self._texts) - 1, 0, -1):
            text = self._texts[phrase_id]
            if text[0] != first:
                continue
            length = len(text)
            if position + length <= end and data[position : position + length] == text:
                return length, phrase_id

        return 0, 0

    def insert(self, parent_id: int, char: int) -> int:
        if not 0 <= parent_id < len(self._texts):
            raise KeyError(parent_id)
        self._texts.append(self._texts[parent_id] + bytes((char,)))
        self._parents.append(parent_id)
        return len(self._texts) - 1

    def phrase(self, phrase_id: int) -> Phrase:
        self._check_id(phrase_id)
        return Phrase(phrase_id, self._parents[phrase_id], self._texts[phrase_id][-1])

    def text(self, phrase_id: int) -> bytes:
        if phrase_id:
            self._check_id(phrase_id)
        return self._texts[phrase_id]

    def __len__(self):
        return len(self._texts) - 1
