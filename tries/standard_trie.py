"""
Standard Trie (character-per-edge) storing the original words as payloads.

This module provides a prefix trie over "words" that may be plain strings or
arbitrary objects projected to strings by a *text selector*. The projected,
optionally case-folded string is the **key**; the node where a key ends keeps
the original word as its payload so searches hand back what was added, not
the key.

Key design choices:
- **Memory efficiency:** `TrieNode` uses `__slots__` and *lazy* child dicts
  (`children=None` until the first child is added).
- **Single normalization policy:** case sensitivity is fixed at construction in
  `TrieConfig` and applied to `add`, `has`, `remove` and `search` alike.
- **Eager pruning:** `remove` clears the payload and deletes every node that is
  left childless and non-terminal, so each non-root node leads to a stored word.


Classes
-------
TrieNode
    Node holding its `character`, `children` (dict[str, TrieNode] or None) and
    `payload`.
TrieConfig
    Case sensitivity flag and default text selector.
Trie
    Public API for add, remove, has, prefix search and structural stats.


Complexity (typical)
--------------------
- add / has / remove: O(L)
- search: O(L + size of the subtree under the prefix)


Conventions & Notes
-------------------
- **Keys:** a `str` word is its own key; any other word goes through the text
  selector. Keys are case-folded with `str.casefold` when the trie is case
  insensitive.
- **Empty key:** never stored; `has("")` is False and `search("")` is empty.
- **Re-adding:** adding a key that is already stored is a silent no-op, even
  when the new word is a different object. The first payload wins.
- **Enumeration order:** follows child insertion order. Sort in the caller if
  lexicographic output is needed.
"""

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Any, Callable, Optional

from .errors import TrieConfigurationError

logger = logging.getLogger(__name__)

TextSelector = Callable[[Any], str]

# Payload of non-terminal nodes; lets falsy words (0, "", {}) be stored.
_EMPTY = object()


def _identity(obj):
  return obj


class TrieNode:
  __slots__ = ("character", "children", "payload")

  def __init__(self, character=""):
    self.character = character
    self.children = None
    self.payload = _EMPTY

  @property
  def is_terminal(self):
    return self.payload is not _EMPTY

  def __repr__(self):
    return f"TrieNode({self.character!r}, terminal={self.is_terminal})"


@dataclass
class TrieConfig:
  """
  Configuration for Trie
      case_insensitive: bool, fold keys with str.casefold before indexing
      text_selector: callable, projects a non-string word to its key text
  """
  case_insensitive: bool = True
  text_selector: Optional[TextSelector] = None

  def __post_init__(self):
    if self.text_selector is None:
      self.text_selector = _identity
    elif not callable(self.text_selector):
      raise TrieConfigurationError(
        f"text_selector must be callable, got {type(self.text_selector).__name__}")


class Trie:
  __slots__ = ("root", "config", "_size")

  def __init__(self, initial_words=None, case_insensitive=True, text_selector=None, *, config=None):
    """Build a trie by adding each of `initial_words` in order.

    Parameters
    ----------
    initial_words : Iterable[str | object] | None
        Words to add at construction.
    case_insensitive : bool, default=True
        Ignored when `config` is given.
    text_selector : Callable[[object], str] | None
        Projects non-string words to their key text. Ignored when `config` is given.
    config : TrieConfig | None
        Full configuration; takes precedence over the two flags above.
    """
    if config is None:
      config = TrieConfig(case_insensitive=case_insensitive, text_selector=text_selector)
    self.config = config
    self.root = TrieNode()
    self._size = 0

    for word in initial_words or ():
      self.add(word)


  def _key(self, word, text_selector=None):
    """Project `word` to its key text and apply the case policy."""
    if isinstance(word, str):
      text = word
    else:
      selector = text_selector or self.config.text_selector
      text = selector(word)
      if text is None:
        text = ""
      elif not isinstance(text, str):
        raise TypeError(
          f"text selector must return str, got {type(text).__name__} for {word!r}")
    return text.casefold() if self.config.case_insensitive else text


  def _find(self, key):
    """Return the node at the end of `key`, or None if the path is missing."""
    node = self.root
    for ch in key:
      node = None if node.children is None else node.children.get(ch)
      if node is None:
        return None
    return node


  def _has_key(self, key, exact_search=True):
    if not key:
      return False
    node = self._find(key)
    if node is None:
      return False
    return node.is_terminal if exact_search else True


  def has(self, search_term, exact_search=True):
    """Return True if `search_term` is stored (or, non-exact, is a stored prefix).

    Parameters
    ----------
    search_term : str | object
        Term to look up; projected and normalized like an added word.
    exact_search : bool, default=True
        If True, the path must end at a stored word. If False, any existing
        path counts, i.e. the term is a prefix of some stored key.
    """
    return self._has_key(self._key(search_term), exact_search)


  def add(self, word, text_selector=None):
    """Add `word`, keeping it as the payload of its terminal node.

    Parameters
    ----------
    word : str | object
        Word to store. Non-string words are projected with `text_selector`.
    text_selector : Callable[[object], str] | None
        Used for this call. If the trie still has the default identity
        selector, it also becomes the selector for later calls.

    Notes
    -----
    - No-op when the key is empty or already stored.
    - Lazily creates child dicts along the path.

    Complexity
    ----------
    O(L) time, O(new_nodes) space where L = len(key).
    """
    if text_selector is not None and self.config.text_selector is _identity:
      # first explicit selector becomes the trie's selector for has/remove/search
      self.config.text_selector = text_selector
    key = self._key(word, text_selector)
    if not key or self._has_key(key):
      return

    node = self.root
    for ch in key:
      children = node.children
      nxt = None if children is None else children.get(ch)
      if nxt is None:
        nxt = TrieNode(ch)
        if children is None:
          node.children = {ch: nxt}
        else:
          children[ch] = nxt
      node = nxt
    node.payload = word
    self._size += 1
    logger.debug("trie add %r (key=%r)", word, key)


  def remove(self, word):
    """Remove the word whose key matches `word`; silent no-op if absent."""
    key = self._key(word)
    if self.is_empty() or not self._has_key(key):
      return
    self._remove(self.root, key, 0)
    self._size -= 1
    logger.debug("trie remove %r (key=%r)", word, key)


  def _remove(self, node, key, depth):
    """Clear the payload at the end of `key` and prune on the way back up.

    Returns True when `node` is now childless and non-terminal, telling the
    parent to drop it. The root's answer is ignored, so it is never deleted.
    """
    if depth == len(key):
      node.payload = _EMPTY
    else:
      ch = key[depth]
      if self._remove(node.children[ch], key, depth + 1):
        del node.children[ch]
        if not node.children:
          node.children = None
    return node.children is None and not node.is_terminal


  def search(self, prefix, limit=None):
    """Return the stored words whose key starts with `prefix`.

    Parameters
    ----------
    prefix : str
        Prefix to enumerate from; normalized like a key. Empty yields nothing.
    limit : int | None, default=None
        If None, return all matches; otherwise at most `limit` of them.

    Returns
    -------
    list
        Original words (objects preserved), in depth-first child insertion
        order, including a word stored exactly at `prefix`.
    """
    key = self._key(prefix)
    if not self._has_key(key, exact_search=False):
      return []
    return list(islice(self._iter_payloads(self._find(key)), limit))


  def _iter_payloads(self, node):
    """Yield payloads under `node` (inclusive) using an iterative pre-order DFS."""
    if node.is_terminal:
      yield node.payload
    stack = [iter(node.children.values())] if node.children else []
    while stack:
      child = next(stack[-1], None)
      if child is None:
        stack.pop()
        continue
      if child.is_terminal:
        yield child.payload
      if child.children:
        stack.append(iter(child.children.values()))


  def is_empty(self):
    return not self.root.children


  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count (root included), or average branching factor.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If True, return average out-degree over internal nodes only:
        `sum(len(children)) / (# internal nodes)`.
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      children = node.children
      if children:
        total_deg += len(children)
        internal += 1
        stack.extend(children.values())
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes


  def __contains__(self, word):
    return self.has(word)

  def __iter__(self):
    return self._iter_payloads(self.root)

  def __len__(self):
    return self._size

  def __repr__(self):
    return f"Trie(size={self._size}, case_insensitive={self.config.case_insensitive})"
