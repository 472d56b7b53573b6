"""LZ78 Encoding"""

import logging
import time
from typing import BinaryIO, Iterator

from lz78_encoding.dictionaries.phrase_dictionary_ABC import PhraseDictionary
from lz78_encoding.dictionaries.registry import resolve_dictionary
from lz78_encoding.dictionaries.tree import TreeDictionary
from lz78_encoding.encoder_ABC import Encoder
from lz78_encoding.factor import Factor
from lz78_encoding.input_buffer import InputBuffer
from lz78_encoding.reporter import OUTPUT_FORMATS, Reporter, format_summary

logger = logging.getLogger(__name__)


class LZ78Encoder(Encoder):
    """
    Greedy LZ78 parser over any PhraseDictionary backend.

    Every backend yields the same factor stream, they only differ in
    lookup cost and memory use.
    """

    def __init__(
        self,
        dictionary: str | type[PhraseDictionary] = "trie",
        output_format: str = "text",
        flush_tail: bool = False,
        timing: bool = False,
    ):
        """
        Args:
            dictionary: Backend name from the registry or a PhraseDictionary subclass
            output_format: "text" for one "<byte><code>\\n" line per factor, "packed" for bits
            flush_tail: Emit a closing factor when the input ends inside a known phrase
            timing: Add elapsed seconds to the summary
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {output_format!r}, expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        self.dictionary_class = resolve_dictionary(dictionary)
        self.output_format = output_format
        self.flush_tail = flush_tail
        self.timing = timing

        # state of the last run
        self.dictionary: PhraseDictionary | None = None
        self.bytes_in = 0
        self.factor_count = 0

    def factors(self, data: bytes | InputBuffer) -> Iterator[Factor]:
        """
        Parses the input into factors, building a fresh dictionary.

        :param data: bytes or an InputBuffer to encode
        :return: iterator of Factor in emission order
        """
        buffer = data if isinstance(data, InputBuffer) else InputBuffer(data)
        dictionary = self.dictionary_class.from_buffer(buffer)
        self.dictionary = dictionary
        self.bytes_in = len(buffer)
        self.factor_count = 0

        view = buffer.view()
        end = len(view)
        position = 0
        logger.debug("encoding %d bytes with %s", end, type(dictionary).__name__)

        while position < end:
            length, matched_id = dictionary.extend_match(view, position)

            if position + length == end:
                # input ends inside a known phrase, no byte left to extend it
                if self.flush_tail:
                    tail = dictionary.phrase(matched_id)
                    self.factor_count += 1
                    yield Factor(tail.char, tail.parent)
                break

            char = view[position + length]
            dictionary.insert(matched_id, char)
            self.factor_count += 1
            yield Factor(char, matched_id)
            position += length + 1

        logger.debug("%d factors, %d phrases", self.factor_count, len(dictionary))
        if isinstance(dictionary, TreeDictionary) and logger.isEnabledFor(logging.DEBUG):
            logger.debug("tree depth %d", dictionary.depth())

    def encode_buffer(self, buffer: bytes | InputBuffer) -> list[Factor]:
        """Returns all factors of the input as a list."""
        return list(self.factors(buffer))

    def write_buffer(self, buffer: InputBuffer, output_stream: BinaryIO) -> str:
        """
        Encodes a loaded buffer into output_stream in the configured format.

        :param buffer: input to encode
        :param output_stream: binary stream for the factors
        :return: run summary
        """
        start = time.perf_counter()
        reporter = Reporter(output_stream, self.output_format)
        count = reporter.write_factors(self.factors(buffer))
        elapsed = time.perf_counter() - start if self.timing else None
        logger.info("encoded %d bytes into %d factors", len(buffer), count)
        return format_summary(len(buffer), count, elapsed)

    def encode(self, input_stream: BinaryIO, output_stream: BinaryIO) -> str:
        return self.write_buffer(InputBuffer.from_stream(input_stream), output_stream)
