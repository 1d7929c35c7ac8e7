"""Error matchers for converting handler exceptions to RpcErrors."""

from .errors import ErrorMatcher, MatchResult


class ExceptionTypeMatcher(ErrorMatcher):
    """Maps one or more exception classes to a registered error template.

    The exception's string form is available to the template as ``{message}``.
    """

    def __init__(
        self,
        exc_types: type[Exception] | tuple[type[Exception], ...],
        key: str,
    ):
        """Initialize matcher.

        Args:
            exc_types: Exception class or classes to match
            key: Template key used for matched exceptions
        """
        self._exc_types = exc_types
        self._key = key

    def matches(self, error: Exception) -> bool:
        """Check if error is one of the configured exception types."""
        return isinstance(error, self._exc_types)

    def extract(self, error: Exception) -> MatchResult:
        """Extract the exception message as template context."""
        return MatchResult(key=self._key, context={"message": str(error)})


class DefaultErrorMatcher(ErrorMatcher):
    """Fallback matcher - always matches.

    A handler failure carrying only a message becomes a -32000 error with that
    message; one with no message at all becomes "unknown error".
    """

    def matches(self, error: Exception) -> bool:
        """Always returns True."""
        return True

    def extract(self, error: Exception) -> MatchResult:
        """Extract default error info.

        Args:
            error: Exception to extract from

        Returns:
            MatchResult with SERVER_ERROR or UNKNOWN_ERROR key
        """
        message = str(error)
        if not message:
            return MatchResult(key="UNKNOWN_ERROR")
        return MatchResult(key="SERVER_ERROR", context={"message": message})


class ErrorMatcherChain:
    """Chain of error matchers. First match wins."""

    def __init__(self, matchers: list[ErrorMatcher] | None = None) -> None:
        """Initialize matcher chain.

        Args:
            matchers: Host matchers, consulted before the default fallback
        """
        self.matchers: list[ErrorMatcher] = list(matchers or [])
        self._default = DefaultErrorMatcher()

    def add(self, matcher: ErrorMatcher) -> None:
        """Add a matcher ahead of the existing ones.

        Args:
            matcher: Matcher to add
        """
        self.matchers.insert(0, matcher)

    def match(self, error: Exception) -> MatchResult:
        """Find first matching matcher and extract.

        Args:
            error: Exception to match

        Returns:
            MatchResult from first matching matcher, or the default
        """
        for matcher in self.matchers:
            if matcher.matches(error):
                return matcher.extract(error)

        return self._default.extract(error)
