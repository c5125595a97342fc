"""
Driver tests - passthrough, literal safety, comments and diagnostics

Anything that is not an activated comment must come out byte for byte.
"""

import io

import pytest

from jsdev.lib.driver import Preprocessor, transform
from jsdev.lib.tags import registry_fromTokens
from jsdev.models.errors import (
    NestedComment,
    UnterminatedCharClass,
    UnterminatedComment,
    UnterminatedRegex,
    UnterminatedString,
)


SAMPLE = """\
// utility module
var re = /[/*]+/g, s = "/*debug not me*/", t = '//', u = `/*log*/`;
var half = total / 2 / count;
/* ordinary comment */
/*unknown(x) stuff stays*/
function f(a, b) {
    return a.replace(/\\/\\*/, '') + (b ? /x/ : /y/i);
}
"""


@pytest.fixture
def registry():
    return registry_fromTokens(["debug", "log:console.log", "alarm:alert"])


class TestPassthrough:
    """Test that unmatched text is untouched"""

    def test_empty(self, registry):
        """Empty input gives empty output"""
        assert transform("", registry) == ""

    def test_sample_unchanged(self, registry):
        """Code without activated comments is reproduced exactly"""
        assert transform(SAMPLE, registry) == SAMPLE

    @pytest.mark.parametrize("newline", ["\n", "\r\n", "\r"])
    def test_line_endings_preserved(self, registry, newline):
        """Line endings are not translated"""
        source = SAMPLE.replace("\n", newline)
        assert transform(source, registry) == source

    def test_unknown_tag_round_trip(self, registry):
        """A comment whose tag is not active is echoed verbatim"""
        assert transform("/*unknown stuff*/", registry) == "/*unknown stuff*/"

    def test_tag_prefix_does_not_match(self, registry):
        """Tags match whole identifier runs only"""
        assert transform("/*debugger x*/", registry) == "/*debugger x*/"
        assert transform("/*debug.x y*/", registry) == "/*debug.x y*/"

    def test_space_after_open_is_plain_comment(self, registry):
        """No space is allowed between /* and the tag"""
        assert transform("/* debug x*/", registry) == "/* debug x*/"

    @pytest.mark.parametrize("comment", ["/**/", "/***/", "/** doc **/", "/*\n * x\n */"])
    def test_plain_comments(self, registry, comment):
        """Comments without a tag are echoed"""
        assert transform(comment, registry) == comment

    def test_empty_registry(self):
        """With nothing activated, tagged comments stay comments"""
        source = "/*debug x*/ /*log y*/"
        assert transform(source, registry_fromTokens([])) == source


class TestLiteralSafety:
    """Test that comments inside literals are never expanded"""

    def test_string(self, registry):
        """Tagged comment text inside a string"""
        source = 's = "/*debug x*/"; /*debug y*/'
        assert transform(source, registry) == 's = "/*debug x*/"; {y}'

    def test_template(self, registry):
        """Tagged comment text inside a template literal"""
        source = "s = `/*debug x*/`;"
        assert transform(source, registry) == source

    def test_line_comment(self, registry):
        """Tagged comment text inside a line comment"""
        source = "// /*debug x*/\n/*debug y*/"
        assert transform(source, registry) == "// /*debug x*/\n{y}"

    def test_line_comment_at_end(self, registry):
        """A line comment may end the input"""
        assert transform("x; // done", registry) == "x; // done"

    def test_regexp_after_equals(self, registry):
        """x=/abc/; is a regexp, so its quote is not a string"""
        source = "x=/'/; /*debug y*/"
        assert transform(source, registry) == "x=/'/; {y}"

    def test_regexp_class_hides_comment_open(self, registry):
        """A /* inside a regexp set is not a comment"""
        source = "x = /[/*]/; /*debug y*/"
        assert transform(source, registry) == "x = /[/*]/; {y}"

    def test_division_after_identifier(self, registry):
        """a = b/c/d; is two divisions, not a regexp"""
        source = "a = b/c/d; /*debug y*/"
        assert transform(source, registry) == "a = b/c/d; {y}"

    def test_division_after_paren(self, registry):
        """A slash after ) is division"""
        source = "n = (a + b) / 2; /*debug y*/"
        assert transform(source, registry) == "n = (a + b) / 2; {y}"

    def test_regexp_after_open_paren(self, registry):
        """A slash after ( is a regexp"""
        source = "f(/'/); /*debug y*/"
        assert transform(source, registry) == "f(/'/); {y}"


class TestUnmatchedComments:
    """Test errors in comments that are echoed"""

    def test_nested_block(self, registry):
        """A /* inside a plain comment"""
        with pytest.raises(NestedComment):
            transform("/* a /* b */", registry)

    def test_nested_line(self, registry):
        """A // inside a plain comment"""
        with pytest.raises(NestedComment):
            transform("/* see http://example.com */", registry)

    def test_unterminated_reports_start_line(self, registry):
        """An unclosed comment reports where it began"""
        with pytest.raises(UnterminatedComment) as excinfo:
            transform("a;\n/* open\n\n", registry)
        assert excinfo.value.line == 2


class TestTopLevelErrors:
    """Test literal errors outside comments"""

    def test_unterminated_string(self, registry):
        """A string that runs off the end reports its first line"""
        with pytest.raises(UnterminatedString) as excinfo:
            transform('x = 1;\ny = "abc\n\n', registry)
        assert excinfo.value.line == 2

    def test_unterminated_regexp(self, registry):
        """A regexp that runs off the end"""
        with pytest.raises(UnterminatedRegex):
            transform("x = /abc", registry)

    def test_unterminated_class(self, registry):
        """A regexp set that runs off the end"""
        with pytest.raises(UnterminatedCharClass):
            transform("x = /[abc", registry)

    def test_crlf_lines_match_lf_lines(self, registry):
        """CRLF input reports the same line numbers as LF input"""
        source = "a;\nb;\nc = 'x\n"
        lines = []
        for text in (source, source.replace("\n", "\r\n")):
            with pytest.raises(UnterminatedString) as excinfo:
                transform(text, registry)
            lines.append(excinfo.value.line)
        assert lines == [3, 3]


class TestPreprocessor:
    """Test the Preprocessor object and its result"""

    def test_leading_comment(self):
        """-comment text is written before the transformed body"""
        registry = registry_fromTokens(["debug", "-comment", "Devel Edition"])
        assert transform("/*debug x*/\n", registry) == "// Devel Edition\n{x}\n"

    def test_result_counts(self, registry):
        """The result counts lines, expansions and echoed comments"""
        source = "/*debug a*/\n/*debug b*/\n/*log c*/\n/* plain */\n"
        sink = io.StringIO(newline="")
        result = Preprocessor(registry, io.StringIO(source, newline=""), sink).run()
        assert result.expansions == {"debug": 2, "log": 1}
        assert result.expansion_total == 3
        assert result.comments_echoed == 1
        assert result.lines == 5

    def test_tag_read_is_bounded(self):
        """Only max_tag_length characters are read as the tag"""
        registry = registry_fromTokens(["deb"])
        assert transform("/*debug x*/", registry, max_tag_length=3) == "{ug x}"
