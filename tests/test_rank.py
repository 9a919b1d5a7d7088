import random
import unittest

from vocab_count_pipeline.vocab.rank import effective_size, rank, rank_report
from vocab_count_pipeline.vocab.state import CountEntry


def entries(**counts):
  return [CountEntry(w.encode("ascii"), c) for w, c in counts.items()]


class TestRank(unittest.TestCase):

  def assertRankOrder(self, vocab):
    for a, b in zip(vocab, vocab[1:]):
      self.assertTrue(a.count > b.count or (a.count == b.count and a.word < b.word), (a, b))

  def test_distinct_counts(self):
    out = rank(entries(c=1, a=3, b=2))
    self.assertListEqual(out, [CountEntry(b"a", 3), CountEntry(b"b", 2), CountEntry(b"c", 1)])

  def test_min_count_cutoff(self):
    out = rank(entries(z=1, y=2, x=2), min_count=2)
    self.assertListEqual(out, [CountEntry(b"x", 2), CountEntry(b"y", 2)])

  def test_ties_broken_bytewise(self):
    out = rank([CountEntry(b"b", 5), CountEntry(b"\xc3\xa9", 5), CountEntry(b"B", 5), CountEntry(b"a", 5)])
    self.assertListEqual([e.word for e in out], [b"B", b"a", b"b", b"\xc3\xa9"])

  def test_empty(self):
    self.assertListEqual(rank([]), [])
    self.assertListEqual(rank([], max_size=10, min_count=5), [])

  def test_zero_max_size_is_no_limit(self):
    vocab = [CountEntry(str(i).encode(), i + 1) for i in range(100)]
    self.assertEqual(len(rank(vocab, max_size=0)), 100)
    self.assertEqual(len(rank(vocab, max_size=100)), 100)
    self.assertEqual(len(rank(vocab, max_size=500)), 100)

  def test_min_count_below_one_never_truncates(self):
    self.assertEqual(len(rank(entries(a=1, b=1), min_count=0)), 2)
    self.assertEqual(len(rank(entries(a=1, b=1), min_count=1)), 2)

  def test_max_size_keeps_highest_counts(self):
    vocab = entries(a=1, b=9, c=4, d=7, e=2)
    out = rank(vocab, max_size=3)
    self.assertListEqual([e.word for e in out], [b"b", b"d", b"c"])

  def test_boundary_ties_keep_input_order_before_truncation(self):
    # five words tied at the boundary; the size limit keeps the first ones
    # in input (table) order, then they are re-sorted alphabetically
    vocab = [CountEntry(b"top", 10), CountEntry(b"q", 3), CountEntry(b"e", 3), CountEntry(b"z", 3),
             CountEntry(b"a", 3), CountEntry(b"m", 3), CountEntry(b"low", 1)]
    out = rank(vocab, max_size=3)
    self.assertListEqual([e.word for e in out], [b"top", b"e", b"q"])

  def test_max_size_then_min_count(self):
    vocab = entries(a=5, b=4, c=2, d=1, e=1)
    out = rank(vocab, max_size=4, min_count=3)
    self.assertListEqual([e.word for e in out], [b"a", b"b"])

  def test_invariants_on_random_input(self):
    rng = random.Random(13)
    words = ["".join(rng.choice("abcdef") for _ in range(rng.randint(1, 4))) for _ in range(300)]
    counts = {}
    for w in words:
      counts[w] = counts.get(w, 0) + rng.randint(1, 5)
    vocab = [CountEntry(w.encode(), c) for w, c in counts.items()]
    rng.shuffle(vocab)

    for max_size in (0, 1, 10, 50):
      for min_count in (1, 3, 8):
        with self.subTest(max_size=max_size, min_count=min_count):
          out = rank(vocab, max_size=max_size, min_count=min_count)
          self.assertRankOrder(out)
          self.assertEqual(len({e.word for e in out}), len(out))
          self.assertTrue(all(e.count >= min_count for e in out))
          if max_size:
            self.assertLessEqual(len(out), max_size)
          if out and max_size and len(out) == max_size:
            boundary = out[-1].count
            kept = {e.word for e in out}
            for e in vocab:
              if e.count > boundary:
                self.assertIn(e.word, kept)
              elif e.count < boundary:
                self.assertNotIn(e.word, kept)


class TestRankReport(unittest.TestCase):

  def test_effective_size(self):
    self.assertEqual(effective_size(10, 0), 10)
    self.assertEqual(effective_size(10, 3), 3)
    self.assertEqual(effective_size(10, 10), 10)
    self.assertEqual(effective_size(10, 20), 10)
    self.assertEqual(effective_size(0, 5), 0)

  def test_flags(self):
    vocab = entries(a=5, b=4, c=2, d=1, e=1)
    by_size = rank_report(5, 2, rank(vocab, max_size=2))
    self.assertTrue(by_size.truncated_at_size)
    self.assertFalse(by_size.truncated_at_min_count)

    by_count = rank_report(5, 0, rank(vocab, min_count=2))
    self.assertTrue(by_count.truncated_at_min_count)
    self.assertFalse(by_count.truncated_at_size)

    untouched = rank_report(5, 0, rank(vocab))
    self.assertFalse(untouched.truncated_at_min_count)
    self.assertFalse(untouched.truncated_at_size)


if __name__ == '__main__':
  unittest.main()
