#!/usr/bin/env python3

"""Typed results of classifying a header line or reconstructed statement."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClassDef:
    """A class definition line, e.g. ``class Foo : public Bar {``."""

    name: str
    base_classes: tuple[str, ...] = field(default_factory=tuple)
    # Text after the opening brace when the body starts on the same line
    body: str = ""


@dataclass(frozen=True)
class ForwardDecl:
    """A forward declaration, e.g. ``class Foo;``."""

    name: str


@dataclass(frozen=True)
class MethodDecl:
    """A complete ``virtual`` statement that should yield a FunctionInfo."""

    statement: str


@dataclass(frozen=True)
class Skip:
    """Anything the generator does not act on."""

    reason: str


Statement = ClassDef | ForwardDecl | MethodDecl | Skip
