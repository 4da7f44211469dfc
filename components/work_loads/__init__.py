#!/usr/bin/env python3
import random

from .record_generator import RecordConfig, RecordGenerator
from .word_generator import gen_words_with_prefix_freq, generate_random_words, word_pool


class WorkLoad:
    def __init__(self, seed=None):
        self.seed = seed

    def words(self, num_words, p_freq=0, unique=False):
        if p_freq > 0:
            return gen_words_with_prefix_freq(num_words, p_freq, self.seed, unique)
        else:
            return generate_random_words(num_words, self.seed, unique)

    def numbers(self, num_values, low=0, high=1_000_000):
        if num_values < 1:
            raise ValueError("num_values must be at least 1")
        rng = random.Random(self.seed)
        return [rng.randint(low, high) for _ in range(num_values)]

    def records(self, num_records, **config):
        return RecordGenerator(RecordConfig(seed=self.seed, **config)).batch(num_records)


__all__ = [
    "WorkLoad",
    "RecordConfig",
    "RecordGenerator",
    "generate_random_words",
    "gen_words_with_prefix_freq",
    "word_pool",
]
