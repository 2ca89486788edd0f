import unittest

from yamlindent.core.errors import TabIndentationError, YAMLEncodingError
from yamlindent.utils.indentation import collect_indent_levels, decode_yaml_text


class TestCollectIndentLevels(unittest.TestCase):

    def test_levels_in_document_order(self):
        text = "root:\n  child:\n    leaf: value\n  other: value\n"
        self.assertEqual(collect_indent_levels(text), [0, 2, 4, 2])

    def test_blank_lines_are_skipped(self):
        text = "\n\nroot:\n\n   \n  child: value\n"
        self.assertEqual(collect_indent_levels(text), [0, 2])

    def test_comment_lines_are_skipped(self):
        text = "# top\nroot:\n      # deep comment\n  child: value\n"
        self.assertEqual(collect_indent_levels(text), [0, 2])

    def test_crlf_line_endings(self):
        text = "root:\r\n  child: value\r\n"
        self.assertEqual(collect_indent_levels(text), [0, 2])

    def test_leading_tab(self):
        with self.assertRaises(TabIndentationError) as ctx:
            collect_indent_levels("root:\n\tchild: value\n")
        self.assertEqual(
            str(ctx.exception), "tab characters are not allowed for indentation in YAML"
        )

    def test_tab_after_spaces(self):
        with self.assertRaises(TabIndentationError):
            collect_indent_levels("root:\n  \tchild: value\n")

    def test_tab_after_content_is_allowed(self):
        self.assertEqual(collect_indent_levels("key:\tvalue\n"), [0])

    def test_tab_indented_comment_is_skipped(self):
        self.assertEqual(collect_indent_levels("root:\n\t# note\n  child: v\n"), [0, 2])

    def test_no_content(self):
        self.assertEqual(collect_indent_levels(""), [])


class TestDecodeYamlText(unittest.TestCase):

    def test_text_passes_through(self):
        self.assertEqual(decode_yaml_text("a: 1\n"), "a: 1\n")

    def test_utf8_bytes(self):
        self.assertEqual(decode_yaml_text("name: Zoë\n".encode("utf-8")), "name: Zoë\n")

    def test_invalid_utf8(self):
        with self.assertRaises(YAMLEncodingError) as ctx:
            decode_yaml_text(b"key: \xff\n")
        self.assertEqual(ctx.exception.position, 5)
        self.assertIn("invalid UTF-8", str(ctx.exception))


if __name__ == '__main__':
    unittest.main()
