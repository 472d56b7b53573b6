"""Lookup of dictionary backends by name."""
from lz78_encoding.dictionaries.linear import LinearDictionary
from lz78_encoding.dictionaries.phrase_dictionary_ABC import PhraseDictionary
from lz78_encoding.dictionaries.tree import TreeDictionary
from lz78_encoding.dictionaries.trie import DenseTrieDictionary, TrieDictionary
from lz78_encoding.input_buffer import InputBuffer

DICTIONARIES: dict[str, type[PhraseDictionary]] = {
    "linear": LinearDictionary,
    "tree": TreeDictionary,
    "trie": TrieDictionary,
    "dense-trie": DenseTrieDictionary,
}


def resolve_dictionary(dictionary: str | type[PhraseDictionary]) -> type[PhraseDictionary]:
    """
    Turns a backend name (or class) into a PhraseDictionary subclass.
    """
    if isinstance(dictionary, type) and issubclass(dictionary, PhraseDictionary):
        return dictionary
    try:
        return DICTIONARIES[dictionary]
    except (KeyError, TypeError):
        raise ValueError(
            f"Unknown dictionary {dictionary!r}, expected one of: {', '.join(DICTIONARIES)}"
        ) from None


def make_dictionary(
    dictionary: str | type[PhraseDictionary], buffer: InputBuffer
) -> PhraseDictionary:
    """
    Builds an empty dictionary of the requested kind for the given input.
    """
    return resolve_dictionary(dictionary).from_buffer(buffer)
