"""CLI module for jgschema."""

from jgschema.cli.error_formatter import ErrorFormatter, RecordTable, RecordTree
from jgschema.cli.exception_handler import report_exception
from jgschema.cli.pydantic_errors import (
    format_pydantic_location,
    get_suggestion_for_error,
    translate_pydantic_error,
)
from jgschema.cli_main import app

__all__ = [
    "app",
    "ErrorFormatter",
    "RecordTable",
    "RecordTree",
    "report_exception",
    "format_pydantic_location",
    "get_suggestion_for_error",
    "translate_pydantic_error",
]
