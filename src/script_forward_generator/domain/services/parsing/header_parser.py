#!/usr/bin/env python3

"""Header parsing across a class's inheritance chain.

The root header is parsed first; its base classes are then visited
depth-first in declaration order, each resolved as ``<Base>.h`` next to
the header that names it. All headers feed the same FunctionRegistry,
so methods declared closer to the root shadow same-named methods of
their ancestors.
"""

from pathlib import Path

from ....exceptions import HeaderNotFoundError
from ....infrastructure.config import GeneratorSettings
from ....infrastructure.logging import ProgressTracker, get_logger, log_timing
from ...models.header import ClassHeader, ForwardDecl, GenerationContext, MethodDecl
from ...repositories import FunctionRegistry
from .signature_extractor import SignatureExtractor
from .statement_classifier import StatementClassifier
from .statement_reconstructor import SourceStatement, StatementReconstructor

logger = get_logger(__name__)


class HeaderParser:
    """Collects the virtual method surface of a class and its bases.

    This class handles:
    - Reading headers and rebuilding multi-line statements
    - Recording forward declarations for include generation
    - Following base classes through sibling header files
    - Skipping headers already visited (repeated or cyclic bases)
    """

    def __init__(
        self,
        settings: GeneratorSettings | None = None,
        tracker: ProgressTracker | None = None,
    ) -> None:
        """Initialize header parser.

        Args:
            settings: Generator settings (marker base class, header extension)
            tracker: Optional progress tracker for statistics
        """
        self.settings = settings or GeneratorSettings()
        self.tracker = tracker or ProgressTracker(logger)
        self.classifier = StatementClassifier(self.settings.marker_base)
        self.extractor = SignatureExtractor()

    @log_timing
    def parse(self, root_header: Path) -> GenerationContext:
        """Parse a root header and every base-class header it reaches.

        Args:
            root_header: Header of the class to forward

        Returns:
            GenerationContext holding the registry and forward declarations

        Raises:
            HeaderNotFoundError: If the root or a base header is missing
            HeaderSyntaxError: If a declaration falls outside the supported grammar
        """
        context = GenerationContext(root_header=root_header, registry=FunctionRegistry())
        self.tracker.reset()
        self.parse_into(context)
        self.tracker.report_summary()
        return context

    def parse_into(self, context: GenerationContext) -> None:
        """Walk the inheritance chain of ``context.root_header``."""
        worklist: list[tuple[Path, Path | None]] = [(context.root_header, None)]

        while worklist:
            path, required_by = worklist.pop()

            if not context.mark_visited(path):
                logger.debug(f"Skipping {path.name}: already parsed")
                continue

            class_header = self.parse_header(path, context, required_by)
            context.class_headers.append(class_header)

            # Reversed so the first declared base is popped first
            for base_class in reversed(class_header.base_classes):
                base_path = class_header.base_header_path(base_class, self.settings.header_extension)
                worklist.append((base_path, path))

    def parse_header(
        self,
        path: Path,
        context: GenerationContext,
        required_by: Path | None = None,
    ) -> ClassHeader:
        """Parse a single header into the context's registry.

        Args:
            path: Header to read
            context: Context receiving functions and forward declarations
            required_by: Header that named this one as a base, for error messages

        Returns:
            ClassHeader with the header's base classes and forward declarations
        """
        class_header = ClassHeader(class_name=path.stem, path=path)
        reconstructor = StatementReconstructor()

        try:
            handle = open(path, encoding="utf-8", errors="replace")
        except FileNotFoundError as e:
            raise HeaderNotFoundError(path, required_by) from e

        with handle, self.tracker.track_header(path):
            for line_number, raw_line in enumerate(handle, 1):
                line = reconstructor.clean(raw_line)
                if not line:
                    continue

                if self.classifier.is_class_line(line):
                    body = self._handle_class_line(line, line_number, class_header, context)
                    pieces = reconstructor.split_inline(body)
                else:
                    pieces = [line]

                for piece in pieces:
                    statement = reconstructor.feed(line_number, piece)
                    if statement is not None:
                        self._handle_statement(statement, path, context)

        if reconstructor.in_block_comment:
            logger.warning(f"{path.name}: block comment is not closed before end of file")
        if reconstructor.pending:
            logger.debug(f"{path.name}: ignoring unterminated text '{reconstructor.pending}'")

        logger.debug(
            f"{path.name}: bases={class_header.base_classes or 'none'}, "
            f"forward declarations={class_header.forward_declarations or 'none'}"
        )
        return class_header

    def _handle_class_line(
        self,
        line: str,
        line_number: int,
        class_header: ClassHeader,
        context: GenerationContext,
    ) -> str:
        """Record a class line; returns any class body written on the same line."""
        result = self.classifier.classify_class_line(line, class_header.path, line_number)

        if isinstance(result, ForwardDecl):
            if result.name not in class_header.forward_declarations:
                class_header.forward_declarations.append(result.name)
            context.add_forward_declaration(result.name)
            return ""

        if result.name != class_header.class_name:
            logger.debug(
                f"{class_header.path.name}:{line_number}: class {result.name} "
                f"does not match header name {class_header.class_name}"
            )

        for base_class in result.base_classes:
            if base_class not in class_header.base_classes:
                class_header.base_classes.append(base_class)

        return result.body

    def _handle_statement(
        self,
        statement: SourceStatement,
        path: Path,
        context: GenerationContext,
    ) -> None:
        self.tracker.count_statement()

        if not isinstance(self.classifier.classify_statement(statement.text), MethodDecl):
            return

        info = self.extractor.extract(statement.text, path, statement.line_number)
        if context.registry.insert_if_absent(info):
            self.tracker.count_registered()
            logger.debug(
                f"{self.tracker.get_current_context()}: registered "
                f"{info.return_type} {info.function_name}({info.parameter})"
            )
        else:
            self.tracker.count_shadowed()
