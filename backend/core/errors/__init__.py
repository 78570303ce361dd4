"""Monadic Error Handling System

Key components:
- Result[T, E]: container for success/failure
- AppError: base error type with code, message, metadata and context
- ErrorCode: hierarchical error code taxonomy
- Builder functions: ergonomic error construction

Usage:
    from core.errors import Ok, Err, Result, AppError, not_found

    def find_child(child_id: str) -> Result[Child, AppError]:
        child = children.get(child_id)
        if not child:
            return not_found("Child", child_id, origin="children")
        return Ok(child)

    match find_child("123"):
        case Ok(child):
            print(child.first_name)
        case Err(error):
            log.error(error.message, code=error.code.name)
"""
from .types import (
    Result,
    Ok,
    Err,
    AppError,
    ErrorCode,
    ErrorContext,
    sequence_results,
    ensure,
)

from .builders import (
    # Validation (E2xxx)
    validation_error,
    invalid_type,
    out_of_range,
    invalid_choice,
    # Database (E4xxx)
    db_error,
    not_found,
    duplicate_key,
    foreign_key_violation,
    db_connection_failed,
    transaction_failed,
    # Data tables (E5xxx)
    invariant_violated,
    # Internal (E9xxx)
    internal_error,
)

from .boundaries import DatabaseErrorMapper

from .handlers import (
    AppErrorException,
    register_error_handlers,
    result_to_response,
    raise_result,
)

__all__ = [
    "Result",
    "Ok",
    "Err",
    "AppError",
    "ErrorCode",
    "ErrorContext",
    "sequence_results",
    "ensure",
    "validation_error",
    "invalid_type",
    "out_of_range",
    "invalid_choice",
    "db_error",
    "not_found",
    "duplicate_key",
    "foreign_key_violation",
    "db_connection_failed",
    "transaction_failed",
    "invariant_violated",
    "internal_error",
    "DatabaseErrorMapper",
    "AppErrorException",
    "register_error_handlers",
    "result_to_response",
    "raise_result",
]
