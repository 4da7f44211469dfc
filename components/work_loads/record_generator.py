import random
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from faker import Faker

## === Config Class === ##

@dataclass
class RecordConfig:
    """
    Configuration for RecordGenerator
        seed: int, seed for Faker and the random number generator
        id_field: str, key holding the record id
        text_field: str, key holding the searchable text
        max_words: int, upper bound on words per text (at least one)
    """
    seed: Optional[int] = None
    id_field: str = "id"
    text_field: str = "text"
    max_words: int = 1

    def __post_init__(self):
        if not self.id_field or not self.text_field:
            raise ValueError("id_field and text_field must be non-empty")
        if self.id_field == self.text_field:
            raise ValueError(f"id_field and text_field must differ, both are {self.id_field!r}")
        if self.max_words < 1:
            raise ValueError("max_words must be at least 1")


class RecordGenerator:
    """Produces dict records whose text field feeds a trie's text selector."""

    def __init__(self, config: RecordConfig):
        self.config = config
        self.rng = random.Random(self.config.seed)

        self.fake = Faker()
        if self.config.seed is not None:
            self.fake.seed_instance(self.config.seed)
        self._next_id = 0

    def text_selector(self, record: Dict[str, Any]) -> str:
        return record[self.config.text_field]

    def single(self) -> Dict[str, Any]:
        n_words = self.rng.randint(1, self.config.max_words)
        record = {
            self.config.id_field: self._next_id,
            self.config.text_field: " ".join(self.fake.words(nb=n_words)),
        }
        self._next_id += 1
        return record

    def batch(self, n) -> List[Dict[str, Any]]:
        if n <= 0:
            raise ValueError("n must be positive")
        return [self.single() for _ in range(n)]
