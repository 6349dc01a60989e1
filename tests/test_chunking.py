import math
import random
import string

import pytest

from doctranslate.translation import split_into_chunks


def generate_text(length: int) -> str:
    random.seed(42)
    alphabet = string.ascii_letters + " абвгдеёжзийклмнопрстуфхцчшщъыьэюя\n"
    return "".join(random.choice(alphabet) for _ in range(length))


@pytest.mark.parametrize("length", (1, 4999, 5000, 5001, 12345))
def test_chunk_count_and_reassembly(length: int) -> None:
    text = generate_text(length)

    chunks = split_into_chunks(text)

    assert len(chunks) == math.ceil(length / 5000)
    assert "".join(chunks) == text
    assert all(len(chunk) == 5000 for chunk in chunks[:-1])
    assert 0 < len(chunks[-1]) <= 5000


def test_ten_thousand_and_one_characters_make_three_chunks() -> None:
    chunks = split_into_chunks("a" * 10_001)

    assert [len(chunk) for chunk in chunks] == [5000, 5000, 1]


def test_split_ignores_word_boundaries() -> None:
    assert split_into_chunks("hello world", max_chars=4) == ["hell", "o wo", "rld"]


def test_empty_text_has_no_chunks() -> None:
    assert split_into_chunks("") == []


def test_non_positive_chunk_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        split_into_chunks("text", max_chars=0)
