"""Tests for frontmatter utilities."""

from docfront.generation.frontmatter import build_frontmatter, parse_frontmatter


class TestBuildFrontmatter:
    """Tests for build_frontmatter function."""

    def test_build_member_frontmatter(self):
        """Build frontmatter for a method page."""
        result = build_frontmatter(
            {
                "name": "bar",
                "kind": "method",
                "qualified_name": "mylib.Foo.bar",
                "library": "mylib",
                "enclosed_by": "Foo",
            }
        )

        assert result.startswith("---\n")
        assert result.endswith("---\n\n")
        assert "name: bar" in result
        assert "kind: method" in result
        assert "qualified_name: mylib.Foo.bar" in result
        assert "enclosed_by: Foo" in result

    def test_none_values_are_omitted(self):
        """Keys whose value is None do not appear."""
        result = build_frontmatter({"name": "mylib", "kind": "library", "library": None})

        assert "library:" not in result
        assert "name: mylib" in result

    def test_key_order_is_preserved(self):
        result = build_frontmatter({"name": "x", "kind": "class", "categories": ["Core"]})

        assert result.index("name:") < result.index("kind:") < result.index("categories:")

    def test_list_values_render_as_block_sequence(self):
        result = build_frontmatter({"categories": ["Core", "IO"]})

        assert "categories:\n- Core\n- IO\n" in result

    def test_operator_names_are_quoted_safely(self):
        """Names that are YAML syntax still round-trip."""
        result = build_frontmatter({"name": "[]=", "kind": "operator"})

        metadata, _ = parse_frontmatter(result + "body")
        assert metadata == {"name": "[]=", "kind": "operator"}


class TestParseFrontmatter:
    """Tests for parse_frontmatter function."""

    def test_parse_valid_frontmatter(self):
        """Parse content with valid frontmatter."""
        content = "---\nname: Foo\nkind: class\n---\n\n# Foo class\n\nA foo."

        metadata, body = parse_frontmatter(content)

        assert metadata == {"name": "Foo", "kind": "class"}
        assert body == "# Foo class\n\nA foo."

    def test_parse_without_frontmatter(self):
        """Content without frontmatter returns None and the full content."""
        content = "# Just a heading\n\nSome text."

        metadata, body = parse_frontmatter(content)

        assert metadata is None
        assert body == content

    def test_parse_unclosed_frontmatter(self):
        """Unclosed frontmatter is treated as body text."""
        content = "---\nname: Foo\n# Heading"

        metadata, body = parse_frontmatter(content)

        assert metadata is None
        assert body == content

    def test_parse_invalid_yaml(self):
        """Invalid YAML returns None and the full content."""
        content = "---\nname: [unclosed\n---\n\nbody"

        metadata, body = parse_frontmatter(content)

        assert metadata is None
        assert body == content

    def test_parse_non_mapping_yaml(self):
        """A YAML scalar is not frontmatter."""
        content = "---\njust text\n---\n\nbody"

        metadata, body = parse_frontmatter(content)

        assert metadata is None
        assert body == content

    def test_build_then_parse(self):
        """Built frontmatter parses back to the same values."""
        values = {"name": "bar", "kind": "method", "categories": ["Core"]}

        metadata, body = parse_frontmatter(build_frontmatter(values) + "# bar method\n")

        assert metadata == values
        assert body == "# bar method\n"
