"""strcmdlex - Parser and compiler for localization string commands.

Recognizes the command mini-language embedded in translatable strings:
parameter references ({STRING}, {1:STRING.gen}), gender declarations
({G=n}) and plural/gender choice lists ({P 1 car cars}). Parsed strings
compile back to canonical text; substituting values is left to the
rendering layer.

Public API:
    parse_string - Parse a string into fragments
    compile_string - Compile fragments back to canonical text
    ParsedString - Ordered, immutable fragment sequence

Exceptions:
    StringCommandError - Base exception class
    StringSyntaxError - Unterminated or invalid command
    CompilationValidationError - Fragment cannot be compiled (validate=True)

Submodules:
    strcmdlex.syntax.ast - Fragment and content node types
    strcmdlex.syntax.parser - StringParser and the command grammars
    strcmdlex.diagnostics - Error codes, templates and formatting
"""

from .diagnostics import CompilationValidationError, StringCommandError, StringSyntaxError
from .syntax import ParsedString
from .syntax import compile as compile_string
from .syntax import parse as parse_string

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("strcmdlex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "CompilationValidationError",
    "ParsedString",
    "StringCommandError",
    "StringSyntaxError",
    "__version__",
    "compile_string",
    "parse_string",
]
