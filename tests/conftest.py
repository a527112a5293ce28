"""Pytest configuration and shared fixtures."""

import sys
import textwrap
from collections.abc import Callable, Generator
from pathlib import Path

import pytest

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from script_forward_generator.infrastructure.config import GeneratorSettings
from script_forward_generator.infrastructure.logging import LoggerSetup

HeaderWriter = Callable[[str, str], Path]


@pytest.fixture
def header_dir(tmp_path: Path) -> Path:
    """Directory holding the headers of one test."""
    directory = tmp_path / "include"
    directory.mkdir()
    return directory


@pytest.fixture
def write_header(header_dir: Path) -> HeaderWriter:
    """
    Write a header into header_dir.

    Usage: write_header("Foo", '''class Foo { ... };''') -> header_dir / "Foo.h"
    """

    def _write(class_name: str, content: str) -> Path:
        path = header_dir / f"{class_name}.h"
        path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def settings() -> GeneratorSettings:
    """Default generator settings."""
    return GeneratorSettings()


@pytest.fixture
def foo_header(write_header: HeaderWriter) -> Path:
    """The single-method Foo class used throughout the docs."""
    return write_header(
        "Foo",
        """
        class Foo
        {
        public:
          virtual void Bar(int x);
        };
        """,
    )


@pytest.fixture
def three_level_chain(write_header: HeaderWriter) -> Path:
    """Root : Mid, Mid : Base, each declaring its own virtual method."""
    write_header(
        "Base",
        """
        #ifndef Base_h_
        #define Base_h_

        class Base
        {
        public:
          virtual ~Base();
          virtual void onBase(int value);
        };

        #endif
        """,
    )
    write_header(
        "Mid",
        """
        #include "Base.h"

        class Mid : public Base
        {
        public:
          virtual bool onMid(const Event& event);
        };
        """,
    )
    return write_header(
        "Root",
        """
        #include "Mid.h"
        #include "ScriptAccess.h"

        class Root : public Mid, public ScriptAccess
        {
        public:
          virtual double onRoot(double ratio) override;
        };
        """,
    )


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Let every test configure logging from scratch."""
    LoggerSetup.reset()
    yield
    LoggerSetup.reset()
