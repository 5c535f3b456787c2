"""
Unit tests for traversal.py and trivia.py

Tests declaration matching, member filtering, comment association and ordering.
"""

import unittest
from pathlib import Path
from extraction.filters import FilterPolicy
from extraction.models import ExtractionRequest
from extraction.parser import parse_bytes, parse_file
from extraction.traversal import extract_methods_from_declaration, walk_declarations
from extraction.trivia import leading_comment

FIXTURES_DIR = Path(__file__).parent / "fixtures"

SCENARIO_SOURCE = b"""interface A {
  /** adds x */
  Foo(x: number): void;
  Bar(): void;
}
"""


def _request(name, include=None, exclude=None):
    return ExtractionRequest(
        file_path="<memory>",
        declaration_name=name,
        include_names=include,
        exclude_names=exclude,
    )


def _records(methods):
    return [
        (m.declaration_name, m.method_name, m.signature_text, m.comment_text)
        for m in methods
    ]


class TestLeadingComment(unittest.TestCase):
    """Test comment association for members."""

    def _members(self, source):
        return parse_bytes(source).declarations[0].members

    def test_doc_comment(self):
        """Test a single doc comment is returned verbatim."""
        member = self._members(SCENARIO_SOURCE)[0]
        self.assertEqual(leading_comment(member, SCENARIO_SOURCE), "/** adds x */")

    def test_no_comment(self):
        """Test a member preceded only by whitespace yields an empty string."""
        member = self._members(SCENARIO_SOURCE)[1]
        self.assertEqual(leading_comment(member, SCENARIO_SOURCE), "")

    def test_multiple_comments_joined(self):
        """Test that every comment in the leading trivia is joined by newlines."""
        tree = parse_file(str(FIXTURES_DIR / "font_instance.d.ts"))
        set_font = tree.declarations[0].members[2]
        self.assertEqual(
            leading_comment(set_font, tree.source),
            "// Set the font to use for displaying text.\n/* Flags are comma-delimited. */",
        )

    def test_multi_line_block_comment(self):
        """Test that a multi-line block comment is kept with its inner lines."""
        tree = parse_file(str(FIXTURES_DIR / "player.d.ts"))
        add_item = tree.declarations[0].members[1]
        self.assertEqual(
            leading_comment(add_item, tree.source),
            "/**\n"
            "     * Adds the given amount of the specified item entry to the player.\n"
            "     */",
        )

    def test_header_comment_not_attributed(self):
        """Test that a declaration's own comment is not given to its first member."""
        source = b"/** The A interface. */\ninterface A {\n    Foo(): void;\n}\n"
        member = self._members(source)[0]
        self.assertEqual(leading_comment(member, source), "")

    def test_blank_lines_do_not_break_trivia(self):
        """Test that a comment separated by blank lines is still leading trivia."""
        source = b"interface A {\n    // note\n\n\n    Foo(): void;\n}\n"
        member = self._members(source)[0]
        self.assertEqual(leading_comment(member, source), "// note")

    def test_comment_before_decorator(self):
        """Test that a comment ahead of a decorator belongs to the method."""
        tree = parse_file(str(FIXTURES_DIR / "widgets.ts"))
        show = tree.declarations[0].members[2]
        self.assertEqual(leading_comment(show, tree.source), "/** Shows the widget. */")


class TestWalkDeclarations(unittest.TestCase):
    """Test the declaration walker end to end on parsed trees."""

    def test_scenario_all_methods(self):
        """Test both methods are extracted with signature and comment."""
        tree = parse_bytes(SCENARIO_SOURCE)
        methods = walk_declarations(tree, _request("A"))
        self.assertEqual(_records(methods), [
            ("A", "Foo", "Foo(x: number): void;", "/** adds x */"),
            ("A", "Bar", "Bar(): void;", ""),
        ])
        self.assertEqual([m.start_line for m in methods], [3, 4])

    def test_scenario_exclude(self):
        """Test the exclude list removes a method."""
        tree = parse_bytes(SCENARIO_SOURCE)
        methods = walk_declarations(tree, _request("A", exclude=["Bar"]))
        self.assertEqual([m.method_name for m in methods], ["Foo"])

    def test_scenario_no_match(self):
        """Test a nonexistent declaration name yields an empty list."""
        tree = parse_bytes(SCENARIO_SOURCE)
        self.assertEqual(walk_declarations(tree, _request("B")), [])

    def test_scenario_exclude_wins(self):
        """Test a name in both include and exclude lists is excluded."""
        tree = parse_bytes(SCENARIO_SOURCE)
        methods = walk_declarations(tree, _request("A", include=["Foo"], exclude=["Foo"]))
        self.assertEqual(methods, [])

    def test_include_list(self):
        """Test the include list keeps only the named methods, in source order."""
        tree = parse_file(str(FIXTURES_DIR / "player.d.ts"))
        methods = walk_declarations(tree, _request("Player", include=["CanBlock", "AddItem"]))
        self.assertEqual([m.method_name for m in methods], ["AddItem", "CanBlock"])

    def test_case_sensitive_match(self):
        """Test declaration names are matched case-sensitively."""
        tree = parse_bytes(SCENARIO_SOURCE)
        self.assertEqual(walk_declarations(tree, _request("a")), [])

    def test_declaration_isolation(self):
        """Test same-named methods of other declarations never leak in."""
        tree = parse_file(str(FIXTURES_DIR / "nested.d.ts"))
        methods = walk_declarations(tree, _request("Player"))
        self.assertEqual(_records(methods), [
            ("Player", "GetLevel", "GetLevel(): number;", "/** Returns the level. */"),
            ("Player", "Despawn", "Despawn(): void;", ""),
        ])

    def test_matches_at_any_depth_in_source_order(self):
        """Test declarations inside namespaces match, grouped per declaration."""
        tree = parse_file(str(FIXTURES_DIR / "nested.d.ts"))
        methods = walk_declarations(tree, _request("Creature"))
        self.assertEqual(_records(methods), [
            ("Creature", "GetLevel", "GetLevel(): number;", "/** Level of the creature. */"),
            ("Creature", "Despawn", "Despawn(delay?: number): void;", ""),
            ("Creature", "Despawn", "Despawn(): void;", ""),
        ])

    def test_skips_declarations_nested_in_non_matching(self):
        """Test a class nested inside a non-matching class is not visited."""
        tree = parse_file(str(FIXTURES_DIR / "widgets.ts"))
        methods = walk_declarations(tree, _request("Widget"))
        self.assertEqual([m.method_name for m in methods], ["show", "render", "describe"])

    def test_descends_into_matching_declaration(self):
        """Test a same-named class nested in a matching class is visited after it."""
        source = b"""class Node {
    clone(): Node {
        class Node {
            inner(): void {}
        }
        return this;
    }
    visit(): void {}
}
"""
        tree = parse_bytes(source)
        methods = walk_declarations(tree, _request("Node"))
        self.assertEqual([m.method_name for m in methods], ["clone", "visit", "inner"])

    def test_signatures_are_source_substrings(self):
        """Test every signature text can be found in the source file."""
        for fixture, name in [
            ("player.d.ts", "Player"),
            ("font_instance.d.ts", "FontInstance"),
            ("widgets.ts", "Widget"),
        ]:
            tree = parse_file(str(FIXTURES_DIR / fixture))
            text = tree.source.decode("utf-8")
            for method in walk_declarations(tree, _request(name)):
                self.assertIn(method.signature_text, text)

    def test_generic_and_optional_signature(self):
        """Test generics and optional parameters are kept verbatim."""
        tree = parse_file(str(FIXTURES_DIR / "player.d.ts"))
        methods = walk_declarations(tree, _request("Player", include=["FindNearest"]))
        self.assertEqual(
            methods[0].signature_text,
            "FindNearest<T extends Unit>(entry: number, range?: number): T | undefined;",
        )


class TestExtractMethodsFromDeclaration(unittest.TestCase):
    """Test per-declaration extraction with a policy."""

    def test_policy_applied(self):
        """Test the policy is consulted for each method member."""
        tree = parse_bytes(SCENARIO_SOURCE)
        declaration = tree.declarations[0]
        methods = extract_methods_from_declaration(
            declaration, tree.source, FilterPolicy(exclude_names=frozenset({"Foo"}))
        )
        self.assertEqual([m.method_name for m in methods], ["Bar"])


if __name__ == "__main__":
    unittest.main()
