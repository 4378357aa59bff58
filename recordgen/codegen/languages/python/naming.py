"""
Python reserved words.

Hard keywords plus the names the generated module imports. Inside a
class body an attribute named ``field`` rebinds the name that later
``field(...)`` defaults call, so those names are escaped too. Other
builtins such as ``id`` or ``type`` stay usable as fields.
"""

# Names bound by the generated module's imports
PYTHON_GENERATED_NAMES = frozenset({"dataclass", "field", "Optional", "Any"})

# Python keywords
PYTHON_KEYWORDS = frozenset(
    {
        "False",
        "None",
        "True",
        "and",
        "as",
        "assert",
        "async",
        "await",
        "break",
        "class",
        "continue",
        "def",
        "del",
        "elif",
        "else",
        "except",
        "finally",
        "for",
        "from",
        "global",
        "if",
        "import",
        "in",
        "is",
        "lambda",
        "nonlocal",
        "not",
        "or",
        "pass",
        "raise",
        "return",
        "try",
        "while",
        "with",
        "yield",
    }
)

PYTHON_RESERVED_WORDS = PYTHON_KEYWORDS | PYTHON_GENERATED_NAMES
