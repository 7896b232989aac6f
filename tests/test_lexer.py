import unittest

from lexer import tokenize


class TestTokenize(unittest.TestCase):
    def test_splits_on_spaces(self):
        self.assertEqual(["ls", "-la", "/tmp"], tokenize("ls -la /tmp"))

    def test_double_quotes_group_words(self):
        self.assertEqual(["echo", "a b", "c"], tokenize('echo "a b" c'))

    def test_quotes_inside_word_are_dropped(self):
        self.assertEqual(["abcd"], tokenize('ab"cd"'))

    def test_escaped_quote_is_literal(self):
        self.assertEqual(['a"b'], tokenize('a\\"b'))

    def test_escaped_quote_inside_quotes(self):
        self.assertEqual(['say "hi"'], tokenize('"say \\"hi\\""'))

    def test_other_escapes_keep_backslash(self):
        # no escape letters are interpreted
        self.assertEqual(["a\\nb"], tokenize("a\\nb"))

    def test_escaped_space_keeps_backslash_and_space(self):
        self.assertEqual(["a\\ b"], tokenize("a\\ b"))

    def test_escaped_backslash(self):
        self.assertEqual(["a\\\\b"], tokenize("a\\\\b"))

    def test_empty_input(self):
        self.assertEqual([], tokenize(""))

    def test_only_spaces(self):
        self.assertEqual([], tokenize("    "))

    def test_whitespace_collapses(self):
        self.assertEqual(["a", "b"], tokenize("  a   b "))

    def test_single_quotes_are_ordinary(self):
        self.assertEqual(["alias", "ll='ls", "-la'"], tokenize("alias ll='ls -la'"))

    def test_unterminated_quote_ends_token(self):
        self.assertEqual(["echo", "a b"], tokenize('echo "a b'))

    def test_trailing_backslash_is_dropped(self):
        self.assertEqual(["echo", "abc"], tokenize("echo abc\\"))

    def test_empty_quotes_produce_no_token(self):
        self.assertEqual(["echo"], tokenize('echo ""'))

    def test_tab_is_not_a_separator(self):
        self.assertEqual(["a\tb"], tokenize("a\tb"))


if __name__ == "__main__":
    unittest.main()
