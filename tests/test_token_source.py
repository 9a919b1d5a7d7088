import io
import unittest

from vocab_count_pipeline.tokens.source import MAX_TOKEN_LENGTH, iter_tokens


class TestIterTokens(unittest.TestCase):

  def test_whitespace_kinds(self):
    data = b"a\tb\nc\r\nd\x0be\x0cf  g"
    self.assertListEqual(list(iter_tokens(io.BytesIO(data))),
                         [b"a", b"b", b"c", b"d", b"e", b"f", b"g"])

  def test_leading_and_trailing_whitespace(self):
    self.assertListEqual(list(iter_tokens(io.BytesIO(b"  \n x y \n\n"))), [b"x", b"y"])

  def test_empty_stream(self):
    self.assertListEqual(list(iter_tokens(io.BytesIO(b""))), [])
    self.assertListEqual(list(iter_tokens(io.BytesIO(b" \n\t "))), [])

  def test_tokens_across_chunk_boundaries(self):
    data = b"alpha beta gamma delta epsilon"
    for chunk_size in (1, 2, 3, 5, 7, 64):
      with self.subTest(chunk_size=chunk_size):
        self.assertListEqual(list(iter_tokens(io.BytesIO(data), chunk_size=chunk_size)),
                             data.split())

  def test_overlong_token_is_truncated(self):
    long_tok = b"q" * (MAX_TOKEN_LENGTH + 250)
    toks = list(iter_tokens(io.BytesIO(b"a " + long_tok + b" b")))
    self.assertListEqual(toks, [b"a", b"q" * MAX_TOKEN_LENGTH, b"b"])

  def test_overlong_token_truncated_across_chunks(self):
    long_tok = b"z" * 50
    toks = list(iter_tokens(io.BytesIO(long_tok + b" end"), max_length=10, chunk_size=4))
    self.assertListEqual(toks, [b"z" * 10, b"end"])

  def test_no_whitespace_at_all(self):
    data = b"x" * 5000
    toks = list(iter_tokens(io.BytesIO(data), chunk_size=333))
    self.assertListEqual(toks, [b"x" * MAX_TOKEN_LENGTH])

  def test_non_utf8_bytes_pass_through(self):
    toks = list(iter_tokens(io.BytesIO(b"\xff\xfe caf\xc3\xa9")))
    self.assertListEqual(toks, [b"\xff\xfe", b"caf\xc3\xa9"])

  def test_invalid_arguments(self):
    with self.assertRaises(ValueError):
      list(iter_tokens(io.BytesIO(b"a"), max_length=0))
    with self.assertRaises(ValueError):
      list(iter_tokens(io.BytesIO(b"a"), chunk_size=0))


if __name__ == '__main__':
  unittest.main()
