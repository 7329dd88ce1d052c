"""
Enums used across the application.
"""

from enum import Enum


class ProgrammingLanguage(str, Enum):
    """
    Closed set of languages a snippet may be written in.

    Any value outside this set is a validation error.
    """

    JAVASCRIPT = "javascript"
    PYTHON = "python"
    JAVA = "java"
    CPP = "cpp"
    C = "c"
    CSHARP = "csharp"
    PHP = "php"
    RUBY = "ruby"
    GO = "go"
    RUST = "rust"
    TYPESCRIPT = "typescript"
    HTML = "html"
    CSS = "css"
    SQL = "sql"
    BASH = "bash"
    POWERSHELL = "powershell"
    SWIFT = "swift"
    KOTLIN = "kotlin"
    SCALA = "scala"
    R = "r"
    PERL = "perl"
    LUA = "lua"
    DART = "dart"
    ELIXIR = "elixir"
    HASKELL = "haskell"


class SortField(str, Enum):
    """Fields a snippet listing can be ordered by."""

    CREATED_AT = "createdAt"
    VIEWS = "views"
    LIKES = "likes"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
