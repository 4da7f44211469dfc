import math
import random
from collections import defaultdict

from faker import Faker

# Faker's lorem provider samples with replacement; this many draws covers
# practically the whole default word list.
POOL_DRAWS = 5_000


def _faker(seed=None):
  fake = Faker()
  if seed is not None:
    fake.seed_instance(seed)
  return fake


def word_pool(seed=None):
  """Sorted, de-duplicated vocabulary drawn from Faker's word list."""
  return sorted(set(_faker(seed).words(nb=POOL_DRAWS)))


def generate_random_words(num_words, seed=None, unique=False):
  """
  Return n random words from Faker's word list.
  - unique=False: sample with replacement (allows duplicates)
  - unique=True: sample without replacement (requires n <= vocabulary size)
  """
  if num_words < 1:
    raise ValueError("num_words must be at least 1")
  fake = _faker(seed)
  if unique:
    vocabulary = len(word_pool(seed))
    if num_words > vocabulary:
      raise ValueError(f"num_words must be between 1 and {vocabulary}")
    return fake.words(nb=num_words, unique=True)
  return fake.words(nb=num_words)


def _p_eff_log(x, max_mean=100):
  # Logarithmic mapping of prefix frequency to effective prefix frequency
  if x < 0 or x > 1:
    raise ValueError("Prefix frequency must be between 0 and 1")
  x = max(0.0, min(0.999999, x))
  k = math.log(max_mean)
  p = 1.0 - math.exp(-k * x)
  return min(p, 0.999999)


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False):
  """Generate words where a higher prefix_freq clusters more words on shared prefixes.

  Words are bucketed by their first two letters; after each pick, further
  words are drawn from the same bucket while a coin with the (log-mapped)
  prefix frequency keeps landing.
  prefix_freq: 0 -> 1
  """
  p_eff = _p_eff_log(prefix_freq)

  pool = word_pool(seed)
  if num_words < 1 or (unique and num_words > len(pool)):
    raise ValueError(f"num_words must be between 1 and {len(pool)}")

  buckets = defaultdict(list)
  for word in pool:
    buckets[word[:2]].append(word)
  prefixes = list(buckets)
  weights = [len(buckets[p]) for p in prefixes]

  rng = random.Random(seed)
  out = []
  seen = set()

  while len(out) < num_words:
    prefix = rng.choices(prefixes, weights=weights)[0]
    options = buckets[prefix]
    if unique:
      options = [w for w in options if w not in seen]
      if not options:
        continue
    word = rng.choice(options)
    out.append(word)
    seen.add(word)

    while len(out) < num_words and rng.random() < p_eff:
      if unique:
        options = [w for w in options if w not in seen]
        if not options:
          break
      word = rng.choice(options)
      out.append(word)
      seen.add(word)
  return out
