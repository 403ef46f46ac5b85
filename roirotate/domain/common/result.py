# roirotate/domain/common/result.py

"""
Result pattern implementation for error handling.

Service methods return either a success value or a DomainError instead of
raising for expected failures such as a missing selection or a bad config
file.
"""
from typing import TypeVar, Generic, Optional, Union, Callable

from roirotate.domain.common.errors import DomainError

T = TypeVar('T')
U = TypeVar('U')


class Result(Generic[T]):
    """
    Success value or failure error of an operation.

    A successful Result may legitimately hold None (for example a cancelled
    dialog or an image stamp that rotated in place).
    """

    def __init__(self, value: Optional[T], error: Optional[Union[str, DomainError]]):
        self._value = value

        if isinstance(error, str):
            self._error = DomainError(message=error)
        else:
            self._error = error

    @classmethod
    def ok(cls, value: T) -> 'Result[T]':
        """Create a successful result."""
        return cls(value, None)

    @classmethod
    def fail(cls, error: Union[str, DomainError]) -> 'Result[T]':
        """Create a failed result from a message or DomainError."""
        return cls(None, error)

    @property
    def is_success(self) -> bool:
        return self._error is None

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @property
    def value(self) -> T:
        """
        Get the success value.

        Raises:
            ValueError: If the result is a failure
        """
        if self.is_failure:
            raise ValueError(f"Cannot access value of a failed result: {self._error}")
        return self._value

    @property
    def error(self) -> DomainError:
        """
        Get the error.

        Raises:
            ValueError: If the result is a success
        """
        if self.is_success:
            raise ValueError("Cannot access error of a successful result")
        return self._error

    def map(self, func: Callable[[T], U]) -> 'Result[U]':
        """Transform the value of a successful result, keeping failures as they are."""
        if self.is_failure:
            return Result.fail(self._error)
        return Result.ok(func(self._value))

    def on_failure(self, action: Callable[[DomainError], None]) -> 'Result[T]':
        if self.is_failure:
            action(self._error)
        return self

    @classmethod
    def from_operation(cls, operation_func, logger, error_type, error_message, **kwargs):
        """
        Run an operation that might raise and wrap the outcome.

        Only OSError, ValueError and LookupError are converted into failures;
        anything else is a bug and propagates.

        Args:
            operation_func: The function to execute
            logger: Logger to use for errors
            error_type: The DomainError subclass to create on failure
            error_message: Error message prefix
            **kwargs: Context information for error details

        Returns:
            A Result with the operation's value or the error
        """
        try:
            result = operation_func()
        except (OSError, ValueError, LookupError) as e:
            error = error_type(
                message=f"{error_message}: {e}",
                details=kwargs,
                inner_error=e
            )
            logger.error(str(error))
            return cls.fail(error)

        if isinstance(result, Result):
            return result
        return cls.ok(result)

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result.ok({self._value!r})"
        return f"Result.fail({self._error})"
