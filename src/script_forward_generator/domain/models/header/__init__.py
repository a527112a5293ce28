#!/usr/bin/env python3

"""Header parsing domain models."""

from .class_header import ClassHeader
from .function_info import FunctionInfo
from .generation_context import GenerationContext
from .statements import ClassDef, ForwardDecl, MethodDecl, Skip, Statement

__all__ = [
    "ClassDef",
    "ClassHeader",
    "ForwardDecl",
    "FunctionInfo",
    "GenerationContext",
    "MethodDecl",
    "Skip",
    "Statement",
]
