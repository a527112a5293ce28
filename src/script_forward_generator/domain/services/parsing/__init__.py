#!/usr/bin/env python3

"""Parsing services for C++ class headers."""

from .header_parser import HeaderParser
from .signature_extractor import SignatureExtractor
from .statement_classifier import StatementClassifier
from .statement_reconstructor import SourceStatement, StatementReconstructor

__all__ = [
    "HeaderParser",
    "SignatureExtractor",
    "SourceStatement",
    "StatementClassifier",
    "StatementReconstructor",
]
