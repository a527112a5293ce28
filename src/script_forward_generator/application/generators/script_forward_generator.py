#!/usr/bin/env python3

"""ScriptForward class generator orchestrator (Application Layer).

Ties the modular components together:
- HeaderParser: walks the header and its base-class headers
- ForwardClassGenerator: renders the declaration and implementation

Both artifacts are rendered in memory before anything is written, so a
failing run leaves the output directory untouched.
"""

from collections.abc import Iterable
from pathlib import Path

from ...domain.services.generation import ForwardClassGenerator, GeneratedSources
from ...domain.services.parsing import HeaderParser
from ...exceptions import ConfigError
from ...infrastructure.config import GeneratorSettings
from ...infrastructure.logging import ProgressTracker, get_logger, log_timing
from ...utils.path_utils import class_name_from_header

logger = get_logger(__name__)


class ScriptForwardGenerator:
    """Generates ``<Name>ScriptForward`` sources from ``<Name>.h``."""

    def __init__(self, settings: GeneratorSettings | None = None):
        """Initialize generator.

        Args:
            settings: Names used in the generated sources (defaults if omitted)
        """
        self.settings = settings or GeneratorSettings()
        self.header_parser = HeaderParser(self.settings, ProgressTracker(logger))
        self.forward_class_generator = ForwardClassGenerator(self.settings)

    @log_timing
    def generate(self, header_path: Path) -> GeneratedSources:
        """Parse a header chain and render both artifacts.

        Args:
            header_path: Header of the class to forward

        Returns:
            Rendered sources, not yet written

        Raises:
            ConfigError: If the header name is not a valid class name
            HeaderNotFoundError: If the header or a base header is missing
            HeaderSyntaxError: If a declaration is outside the supported grammar
        """
        try:
            class_name = class_name_from_header(header_path)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        logger.info(f"Generating {self.forward_class_generator.forward_class_name(class_name)}")

        context = self.header_parser.parse(header_path)
        logger.info(
            f"Found {len(context.registry)} forwardable method(s) "
            f"in {len(context.class_headers)} header(s)"
        )
        return self.forward_class_generator.render(context)

    def write(self, sources: GeneratedSources, output_dir: Path) -> tuple[Path, Path]:
        """Write rendered sources into ``output_dir``.

        Returns:
            Paths of the written header and implementation
        """
        output_dir.mkdir(parents=True, exist_ok=True)

        header_file = output_dir / sources.header_filename
        implementation_file = output_dir / sources.implementation_filename

        header_file.write_text(sources.header_text, encoding="utf-8")
        implementation_file.write_text(sources.implementation_text, encoding="utf-8")

        logger.info(f"[SUCCESS] Generated: {header_file}")
        logger.info(f"[SUCCESS] Generated: {implementation_file}")
        return header_file, implementation_file

    def generate_to(self, header_path: Path, output_dir: Path) -> tuple[Path, Path]:
        """Generate and write the sources for one header."""
        sources = self.generate(header_path)
        return self.write(sources, output_dir)

    def generate_many(
        self, header_paths: Iterable[Path], output_dir: Path
    ) -> dict[Path, tuple[Path, Path]]:
        """Generate forward classes for several headers in one process.

        Each header gets its own parse context. All headers are rendered
        before any file is written, so one bad header writes nothing.
        """
        rendered = [(path, self.generate(path)) for path in header_paths]
        return {path: self.write(sources, output_dir) for path, sources in rendered}
