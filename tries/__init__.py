from .errors import TrieConfigurationError, TrieError
from .standard_trie import Trie, TrieConfig, TrieNode

__all__ = [
    "Trie",
    "TrieConfig",
    "TrieNode",
    "TrieError",
    "TrieConfigurationError",
]
