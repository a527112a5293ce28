#!/usr/bin/env python3

"""Unit tests for SignatureExtractor."""

from pathlib import Path

import pytest

from script_forward_generator.domain.services.parsing import SignatureExtractor
from script_forward_generator.exceptions import HeaderSyntaxError, SignatureError


@pytest.fixture
def extractor():
    """SignatureExtractor instance."""
    return SignatureExtractor()


@pytest.mark.unit
class TestEligibility:
    """Which statements are considered at all."""

    @pytest.mark.parametrize(
        "statement",
        [
            "virtual void Bar(int x);",
            "virtual   int size(int hint) {}",
        ],
    )
    def test_virtual_methods_are_eligible(self, extractor, statement):
        assert extractor.is_eligible(statement)

    @pytest.mark.parametrize(
        "statement",
        [
            "virtual ~Foo();",
            "virtual ~Foo() {}",
            "void Bar(int x);",
            "static virtual void Bar(int x);",
            "virtualize(int x);",
            "",
        ],
    )
    def test_other_statements_are_not(self, extractor, statement):
        assert not extractor.is_eligible(statement)

    def test_extract_rejects_destructor(self, extractor):
        with pytest.raises(SignatureError):
            extractor.extract("virtual ~Foo();")


@pytest.mark.unit
class TestExtract:
    """Signature decomposition."""

    def test_simple_declaration(self, extractor):
        """Test the basic one-argument form."""
        info = extractor.extract("virtual void Bar(int x);")

        assert info.function_name == "Bar"
        assert info.return_type == "void"
        assert info.argument_type == "int"
        assert info.argument_name == "x"

    def test_override_is_stripped(self, extractor):
        info = extractor.extract("virtual void Bar(int x) override;")

        assert info.function_name == "Bar"
        assert info.argument_name == "x"

    @pytest.mark.parametrize(
        "statement",
        [
            "virtual void Bar(int x) {}",
            "virtual void Bar(int x) { }",
            "virtual void Bar(int x) override {}",
            "virtual void Bar(int x) {};",
        ],
    )
    def test_empty_inline_body_is_stripped(self, extractor, statement):
        info = extractor.extract(statement)

        assert (info.function_name, info.argument_type, info.argument_name) == ("Bar", "int", "x")

    def test_qualified_argument_type(self, extractor):
        """Everything between the parenthesis and the name is the type."""
        info = extractor.extract("virtual bool handle(const Event& event);")

        assert info.return_type == "bool"
        assert info.argument_type == "const Event&"
        assert info.argument_name == "event"

    def test_pointer_bound_to_name(self, extractor):
        """A ``*`` written against the name belongs to the type."""
        info = extractor.extract("virtual void attach(Node *node);")

        assert info.argument_type == "Node *"
        assert info.argument_name == "node"

    def test_single_token_return_type_with_symbols(self, extractor):
        info = extractor.extract("virtual Node* child(unsigned index);")

        assert info.return_type == "Node*"
        assert info.function_name == "child"

    def test_extra_whitespace(self, extractor):
        info = extractor.extract("  virtual  void   Bar (  int   x  )  ;  ")

        assert (info.return_type, info.function_name) == ("void", "Bar")
        assert (info.argument_type, info.argument_name) == ("int", "x")

    def test_provenance_is_recorded(self, extractor):
        info = extractor.extract("virtual void Bar(int x);", Path("Foo.h"), 12)

        assert info.source_file == Path("Foo.h")
        assert info.line_number == 12


@pytest.mark.unit
class TestGrammarViolations:
    """Declarations outside the supported grammar are reported, not mangled."""

    @pytest.mark.parametrize(
        "statement, fragment",
        [
            ("virtual const Foo& get(int x);", "single token"),
            ("virtual void Bar();", "found none"),
            ("virtual void Bar(void);", "found none"),
            ("virtual void Bar(int a, int b);", "exactly one argument"),
            ("virtual void Bar(int x = 3);", "default argument"),
            ("virtual void Bar(std::vector<int> v);", "template"),
            ("virtual void Bar(int);", "type and a name"),
            ("virtual void Bar(x);", "type and a name"),
            ("virtual void Bar(int x) = 0;", "pure virtual"),
            ("virtual void Bar(int x) const;", "unsupported qualifier"),
            ("virtual void Bar(int x) { run(x); }", "must be empty"),
            ("virtual Bar;", "missing argument list"),
        ],
    )
    def test_violation_is_detected(self, extractor, statement, fragment):
        with pytest.raises(SignatureError) as excinfo:
            extractor.extract(statement)

        assert fragment in str(excinfo.value)

    def test_error_carries_location(self, extractor):
        with pytest.raises(SignatureError) as excinfo:
            extractor.extract("virtual void Bar();", Path("include/Foo.h"), 7)

        error = excinfo.value
        assert isinstance(error, HeaderSyntaxError)
        assert error.path == Path("include/Foo.h")
        assert error.line_number == 7
        assert str(error).startswith(f"{Path('include/Foo.h')}:7: ")
