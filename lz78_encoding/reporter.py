"""
Output side of the encoder: factor streams and the run summary.
"""
from typing import BinaryIO, Iterable

from lz78_encoding.bit_writer import BitWriter
from lz78_encoding.factor import Factor

OUTPUT_FORMATS = ("text", "packed")


def code_width(index: int) -> int:
    """
    Bits needed for the code of the index-th factor (1-based).
    Before that factor is emitted only ids 0..index-1 exist.
    """
    return (index - 1).bit_length()


def pack_factors(factors: Iterable[Factor]) -> bytes:
    """
    Packs factors into the binary container:
    4-byte big-endian factor count, then for each factor its code in
    code_width(i) bits followed by the byte in 8 bits, zero padded.

    :param factors: factors in emission order
    :return: packed bytes
    """
    writer = BitWriter()
    count = 0
    for count, factor in enumerate(factors, start=1):
        writer.write_bits_msb(factor.code, code_width(count))
        writer.write_bits_msb(factor.char, 8)
    return count.to_bytes(4, "big") + writer.to_bytes()


def format_summary(bytes_in: int, factor_count: int, elapsed: float | None = None) -> str:
    """
    Two-line run summary, with elapsed seconds on a third line if given.
    """
    lines = [
        f"encode:{bytes_in:7d} bytes input",
        f"encode:{factor_count:7d} factors generated",
    ]
    if elapsed is not None:
        lines.append(f"{elapsed:f}s")
    return "\n".join(lines)


class Reporter:
    """Writes factors to a binary output stream in one of OUTPUT_FORMATS."""

    def __init__(self, output_stream: BinaryIO, output_format: str = "text"):
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output format {output_format!r}, expected one of: {', '.join(OUTPUT_FORMATS)}"
            )
        self.output_stream = output_stream
        self.output_format = output_format

    def write_factors(self, factors: Iterable[Factor]) -> int:
        """
        Writes all factors and returns how many were written.
        """
        if self.output_format == "packed":
            factors = list(factors)
            self.output_stream.write(pack_factors(factors))
            return len(factors)

        count = 0
        for factor in factors:
            self.output_stream.write(factor.to_line())
            count += 1
        return count
