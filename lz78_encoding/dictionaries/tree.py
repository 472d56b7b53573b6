"""
LZ78 dictionary kept as a binary search tree ordered by phrase text.
"""
from lz78_encoding.dictionaries.phrase_dictionary_ABC import PhraseDictionary
from lz78_encoding.factor import Phrase

NIL = -1  # Missing child link


class TreeDictionary(PhraseDictionary):
    """
    Unbalanced BST over phrase texts, compared lexicographically as bytes.

    Nodes live in parallel lists indexed by phrase id, so both search and
    insert are plain loops and the tree is released together with the lists.
    Average lookup is O(log n) string comparisons, O(n) on sorted input.
    """

    def __init__(self):
        # Slot 0 is the empty phrase, it is never linked into the tree
        self._texts: list[bytes] = [b""]
        self._parents: list[int] = [0]
        self._left: list[int] = [NIL]
        self._right: list[int] = [NIL]
        self._root = NIL

    def _search(self, text: bytes) -> int:
        """
        Walks the tree looking for an exact text.

        :param text: phrase text to find
        :return: id of the matching node or NIL
        """
        node = self._root
        while node != NIL:
            node_text = self._texts[node]
            if text < node_text:
                node = self._left[node]
            elif text > node_text:
                node = self._right[node]
            else:
                return node
        return NIL

    def extend_match(self, data: memoryview, position: int) -> tuple[int, int]:
        end = len(data)
        length = 0
        matched_id = 0

        # grow the candidate one byte at a time until the tree misses it
        while position + length < end:
            node = self._search(bytes(data[position : position + length + 1]))
            if node == NIL:
                break
            matched_id = node
            length += 1

        return length, matched_id

    def insert(self, parent_id: int, char: int) -> int:
        if not 0 <= parent_id < len(self._texts):
            raise KeyError(parent_id)
        text = self._texts[parent_id] + bytes((char,))
        new_id = len(self._texts)

        if self._root == NIL:
            self._root = new_id
        else:
            node = self._root
            while True:
                node_text = self._texts[node]
                if text < node_text:
                    if self._left[node] == NIL:
                        self._left[node] = new_id
                        break
                    node = self._left[node]
                elif text > node_text:
                    if self._right[node] == NIL:
                        self._right[node] = new_id
                        break
                    node = self._right[node]
                else:
                    raise ValueError(f"Phrase {text!r} is already stored as id {node}")

        self._texts.append(text)
        self._parents.append(parent_id)
        self._left.append(NIL)
        self._right.append(NIL)
        return new_id

    def phrase(self, phrase_id: int) -> Phrase:
        self._check_id(phrase_id)
        return Phrase(phrase_id, self._parents[phrase_id], self._texts[phrase_id][-1])

    def text(self, phrase_id: int) -> bytes:
        if phrase_id:
            self._check_id(phrase_id)
        return self._texts[phrase_id]

    def depth(self) -> int:
        """
        Height of the tree in nodes, 0 for an empty tree.
        """
        if self._root == NIL:
            return 0
        deepest = 0
        stack = [(self._root, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            for child in (self._left[node], self._right[node]):
                if child != NIL:
                    stack.append((child, level + 1))
        return deepest

    def __len__(self):
        return len(self._texts) - 1
