import random

import pytest

from lz78_encoding.dictionaries.registry import DICTIONARIES

SAMPLES = {
    "empty": b"",
    "single": b"a",
    "distinct": b"abcdef",
    "run": b"a" * 100,
    "classic": b"ABBCBCABABCAABCAAB",
    "text": b"the rain in spain stays mainly in the plain\n" * 8,
    "sorted": bytes(range(256)) * 3,
    "binary": bytes([0, 0, 255, 0, 1, 255, 255, 0]) * 20,
    "random": random.Random(78).randbytes(3000),
}


def replay(factors) -> bytes:
    """Rebuilds the bytes described by a factor stream."""
    texts = [b""]
    out = bytearray()
    for factor in factors:
        text = texts[factor.code] + bytes((factor.char,))
        out += text
        texts.append(text)
    return bytes(out)


@pytest.fixture(params=list(DICTIONARIES))
def backend_name(request):
    return request.param


@pytest.fixture(params=list(SAMPLES))
def sample(request):
    return SAMPLES[request.param]
