#!/usr/bin/env python3

"""C++ source generation for ScriptForward classes.

Renders ``<Name>ScriptForward.h`` and ``<Name>ScriptForward.C`` from the
functions collected by the header parser. Rendering is pure: the same
inputs always produce byte-identical text and nothing touches the disk.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ....infrastructure.config import GeneratorSettings
from ....infrastructure.logging import get_logger, log_timing
from ....utils.path_utils import create_header_filename, include_guard
from ...models.header import FunctionInfo, GenerationContext

logger = get_logger(__name__)


@dataclass(frozen=True)
class GeneratedSources:
    """The two rendered artifacts of one forward class."""

    header_filename: str
    header_text: str
    implementation_filename: str
    implementation_text: str


class ForwardClassGenerator:
    """Generates the forward class declaration and implementation.

    For every function ``f`` the forward class gets:
    - ``f``: calls the script's ``fScript`` when defined, else the base ``f``
    - ``fScript``: always calls the base ``f``
    - a ``DEF_F(fScript)`` entry in the reflection block
    """

    def __init__(self, settings: GeneratorSettings | None = None) -> None:
        self.settings = settings or GeneratorSettings()

    def forward_class_name(self, class_name: str) -> str:
        return f"{class_name}{self.settings.class_suffix}"

    def script_function_name(self, info: FunctionInfo) -> str:
        return f"{info.function_name}{self.settings.script_suffix}"

    def method_prototypes(self, info: FunctionInfo) -> list[str]:
        """Declarations of the overriding method and its script sibling."""
        return [
            f"  virtual {info.return_type} {info.function_name}({info.parameter}) override;",
            f"  virtual {info.return_type} {self.script_function_name(info)}({info.parameter});",
        ]

    def method_implementations(self, class_name: str, info: FunctionInfo) -> list[str]:
        """Bodies of the overriding method and its script sibling."""
        forward_class = self.forward_class_name(class_name)
        bridge = self.settings.bridge_base
        script_name = self.script_function_name(info)

        return [
            f"{info.return_type} {forward_class}::{info.function_name}({info.parameter})",
            "{",
            f'  if ({bridge}::hasFunction("{script_name}", true))',
            f'    {bridge}::call("{script_name}", {info.argument_name}, result_);',
            "  else",
            f"    {class_name}::{info.function_name}({info.argument_name});",
            "}",
            "",
            f"{info.return_type} {forward_class}::{script_name}({info.parameter})",
            "{",
            f"  {class_name}::{info.function_name}({info.argument_name});",
            "}",
            "",
        ]

    def export_define(self, info: FunctionInfo) -> str:
        """Registration entry exposing the script entry point."""
        return f"  .DEF_F({self.script_function_name(info)})"

    def render_header(self, class_name: str, functions: Iterable[FunctionInfo]) -> str:
        """Render the forward class declaration."""
        forward_class = self.forward_class_name(class_name)
        bridge = self.settings.bridge_base
        guard = include_guard(forward_class)
        extension = self.settings.header_extension

        lines = [
            f"#ifndef {guard}",
            f"#define {guard}",
            "",
            f'#include "{class_name}{extension}"',
            f'#include "{bridge}{extension}"',
            "",
            f"class {forward_class} : public {class_name}, public {bridge}",
            "{",
            "public:",
            f"  {forward_class}();",
            f"  ~{forward_class}();",
            "",
        ]

        prototypes = [line for info in functions for line in self.method_prototypes(info)]
        if prototypes:
            lines.extend(prototypes)
            lines.append("")

        lines.extend(
            [
                "private:",
                f"  {bridge} result_;",
                "};",
                "",
                "#endif",
                "",
            ]
        )
        return "\n".join(lines)

    def render_implementation(
        self,
        class_name: str,
        functions: Iterable[FunctionInfo],
        forward_declarations: Iterable[str] = (),
    ) -> str:
        """Render the forward class implementation and reflection block."""
        forward_class = self.forward_class_name(class_name)
        extension = self.settings.header_extension
        functions = list(functions)

        lines = [f'#include "{forward_class}{extension}"']
        lines.extend(f'#include "{name}{extension}"' for name in forward_declarations)
        lines.extend(
            [
                f'#include "{self.settings.registry_include}"',
                "",
                f"{forward_class}::{forward_class}()",
                "{",
                "}",
                "",
                f"{forward_class}::~{forward_class}()",
                "{",
                "}",
                "",
            ]
        )

        for info in functions:
            lines.extend(self.method_implementations(class_name, info))

        registrations = ["  .def_c(Reflection::init<>())"]
        registrations.extend(self.export_define(info) for info in functions)
        registrations[-1] += ";"

        lines.append(f"REFLECT_CLASS_DERIVED({forward_class}, {class_name})")
        lines.extend(registrations)
        lines.extend(["}", ""])
        return "\n".join(lines)

    @log_timing
    def render(self, context: GenerationContext) -> GeneratedSources:
        """Render both artifacts for a fully parsed context."""
        class_name = context.class_name
        forward_class = self.forward_class_name(class_name)
        functions = list(context.registry)

        logger.debug(
            f"Rendering {forward_class} with {len(functions)} forwarded method(s) "
            f"and {len(context.forward_declarations)} extra include(s)"
        )

        return GeneratedSources(
            header_filename=create_header_filename(
                class_name, self.settings.class_suffix, self.settings.header_extension
            ),
            header_text=self.render_header(class_name, functions),
            implementation_filename=create_header_filename(
                class_name, self.settings.class_suffix, self.settings.implementation_extension
            ),
            implementation_text=self.render_implementation(
                class_name, functions, context.forward_declarations
            ),
        )
