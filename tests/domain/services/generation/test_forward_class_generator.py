#!/usr/bin/env python3

"""Unit tests for ForwardClassGenerator."""

from pathlib import Path

import pytest

from script_forward_generator.domain.models.header import FunctionInfo, GenerationContext
from script_forward_generator.domain.repositories import FunctionRegistry
from script_forward_generator.domain.services.generation import ForwardClassGenerator
from script_forward_generator.infrastructure.config import GeneratorSettings

FOO_HEADER = """\
#ifndef FooScriptForward_h_
#define FooScriptForward_h_

#include "Foo.h"
#include "ScriptObject.h"

class FooScriptForward : public Foo, public ScriptObject
{
public:
  FooScriptForward();
  ~FooScriptForward();

  virtual void Bar(int x) override;
  virtual void BarScript(int x);

private:
  ScriptObject result_;
};

#endif
"""

FOO_IMPLEMENTATION = """\
#include "FooScriptForward.h"
#include "ReflectionRegistry.h"

FooScriptForward::FooScriptForward()
{
}

FooScriptForward::~FooScriptForward()
{
}

void FooScriptForward::Bar(int x)
{
  if (ScriptObject::hasFunction("BarScript", true))
    ScriptObject::call("BarScript", x, result_);
  else
    Foo::Bar(x);
}

void FooScriptForward::BarScript(int x)
{
  Foo::Bar(x);
}

REFLECT_CLASS_DERIVED(FooScriptForward, Foo)
  .def_c(Reflection::init<>())
  .DEF_F(BarScript);
}
"""


@pytest.fixture
def generator():
    """ForwardClassGenerator with default settings."""
    return ForwardClassGenerator()


@pytest.fixture
def bar():
    return FunctionInfo("Bar", "void", "int", "x")


@pytest.mark.unit
class TestForwardClassGenerator:
    """Test suite for ForwardClassGenerator."""

    def test_foo_header(self, generator, bar):
        assert generator.render_header("Foo", [bar]) == FOO_HEADER

    def test_foo_implementation(self, generator, bar):
        assert generator.render_implementation("Foo", [bar]) == FOO_IMPLEMENTATION

    def test_method_prototypes(self, generator):
        info = FunctionInfo("handle", "bool", "const Event&", "event")

        assert generator.method_prototypes(info) == [
            "  virtual bool handle(const Event& event) override;",
            "  virtual bool handleScript(const Event& event);",
        ]

    def test_export_define(self, generator, bar):
        assert generator.export_define(bar) == "  .DEF_F(BarScript)"

    def test_no_functions(self, generator):
        """A class without forwardable methods still registers its constructor."""
        header = generator.render_header("Foo", [])
        implementation = generator.render_implementation("Foo", [])

        assert "override" not in header
        assert "  ~FooScriptForward();\n\nprivate:" in header
        assert "::call(" not in implementation
        assert implementation.endswith(
            "REFLECT_CLASS_DERIVED(FooScriptForward, Foo)\n"
            "  .def_c(Reflection::init<>());\n"
            "}\n"
        )

    def test_functions_keep_registry_order(self, generator):
        functions = [
            FunctionInfo("zeta", "void", "int", "z"),
            FunctionInfo("alpha", "int", "float", "a"),
        ]

        header = generator.render_header("Foo", functions)
        implementation = generator.render_implementation("Foo", functions)

        assert header.index("zeta(") < header.index("alpha(")
        assert implementation.index("FooScriptForward::zeta(") < implementation.index(
            "FooScriptForward::alpha("
        )
        assert implementation.endswith(
            "  .def_c(Reflection::init<>())\n"
            "  .DEF_F(zetaScript)\n"
            "  .DEF_F(alphaScript);\n"
            "}\n"
        )

    def test_forward_declaration_includes(self, generator, bar):
        implementation = generator.render_implementation("Foo", [bar], ["Texture", "Shader"])

        assert implementation.startswith(
            '#include "FooScriptForward.h"\n'
            '#include "Texture.h"\n'
            '#include "Shader.h"\n'
            '#include "ReflectionRegistry.h"\n'
        )

    def test_non_void_return_type_in_definitions(self, generator):
        info = FunctionInfo("size", "int", "unsigned", "hint")

        lines = generator.method_implementations("Foo", info)

        assert lines[0] == "int FooScriptForward::size(unsigned hint)"
        assert "int FooScriptForward::sizeScript(unsigned hint)" in lines
        assert "  Foo::size(hint);" in lines

    def test_custom_settings(self, bar):
        settings = GeneratorSettings(
            bridge_base="LuaObject",
            registry_include="Registry.hpp",
            class_suffix="Bridge",
            script_suffix="Lua",
            header_extension=".hpp",
        )
        generator = ForwardClassGenerator(settings)

        header = generator.render_header("Foo", [bar])
        implementation = generator.render_implementation("Foo", [bar])

        assert "class FooBridge : public Foo, public LuaObject" in header
        assert '#include "Foo.hpp"' in header
        assert "  virtual void BarLua(int x);" in header
        assert 'LuaObject::hasFunction("BarLua", true)' in implementation
        assert '#include "Registry.hpp"' in implementation
        assert "  .DEF_F(BarLua);" in implementation


@pytest.mark.unit
class TestRender:
    """Rendering a parsed context."""

    @pytest.fixture
    def context(self, bar):
        registry = FunctionRegistry()
        registry.insert_if_absent(bar)
        return GenerationContext(
            root_header=Path("include/Foo.h"),
            registry=registry,
            forward_declarations=["Texture"],
        )

    def test_render_names_and_text(self, generator, context):
        sources = generator.render(context)

        assert sources.header_filename == "FooScriptForward.h"
        assert sources.implementation_filename == "FooScriptForward.C"
        assert sources.header_text == FOO_HEADER
        assert '#include "Texture.h"' in sources.implementation_text

    def test_render_is_deterministic(self, generator, context):
        assert generator.render(context) == generator.render(context)
