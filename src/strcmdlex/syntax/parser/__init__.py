"""String command parser module.

This module provides the main StringParser class and related parsing
utilities organized into focused submodules.

Module Organization:
- core.py: Main StringParser class (scanner) and parse() entry point
- rules.py: The three bracketed-span grammars and their ordered dispatch
- primitives.py: Index conversion, identifier checks and choice tokens

Public API:
    StringParser: Main parser class
    parse_fragment_content: Classify a single bracketed span (advanced usage)
"""

from strcmdlex.syntax.parser.core import StringParser
from strcmdlex.syntax.parser.rules import parse_fragment_content

__all__ = ["StringParser", "parse_fragment_content"]
