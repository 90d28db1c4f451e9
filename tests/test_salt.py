"""Tests for builder/salt.py."""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor

import pytest

from poly_order_utils.builder.salt import SALT_BITS, SequentialSaltGenerator, generate_salt


class TestGenerateSalt:

    def test_range(self):
        for _ in range(200):
            salt = generate_salt()
            assert isinstance(salt, int)
            assert 0 <= salt < 2**SALT_BITS

    def test_varies(self):
        assert len({generate_salt() for _ in range(50)}) > 1


class TestSequentialSaltGenerator:

    def test_counts_from_start(self):
        gen = SequentialSaltGenerator(start=10)
        assert [gen(), gen(), gen()] == [10, 11, 12]

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            SequentialSaltGenerator(start=-1)

    def test_thread_safe(self):
        gen = SequentialSaltGenerator()
        with ThreadPoolExecutor(max_workers=8) as pool:
            salts = list(pool.map(lambda _: gen(), range(1000)))
        assert sorted(salts) == list(range(1000))
