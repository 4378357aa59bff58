"""
TypeScript reserved words: keywords, strict-mode reserved words and
primitive type names.
"""

TYPESCRIPT_RESERVED_WORDS = frozenset(
    {
        # Keywords
        "break",
        "case",
        "catch",
        "class",
        "const",
        "continue",
        "debugger",
        "default",
        "delete",
        "do",
        "else",
        "enum",
        "export",
        "extends",
        "false",
        "finally",
        "for",
        "function",
        "if",
        "import",
        "in",
        "instanceof",
        "new",
        "null",
        "return",
        "super",
        "switch",
        "this",
        "throw",
        "true",
        "try",
        "typeof",
        "var",
        "void",
        "while",
        "with",
        # Strict mode and contextual
        "as",
        "implements",
        "interface",
        "let",
        "package",
        "private",
        "protected",
        "public",
        "static",
        "yield",
        "from",
        "of",
        "type",
        # Primitive types
        "any",
        "boolean",
        "number",
        "string",
        "symbol",
    }
)
