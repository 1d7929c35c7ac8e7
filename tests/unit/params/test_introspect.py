"""Tests for parameter descriptors and signature introspection."""

from typing import Any

import pytest

from jsonrpc_core.params import (
    MethodSignature,
    OptionalParam,
    RequiredParam,
    check_arity,
    return_type_of,
    signature_from_callable,
)


@pytest.mark.unit
class TestMethodSignature:
    """Tests for MethodSignature."""

    def test_preserves_order(self):
        sig = MethodSignature([RequiredParam("b"), RequiredParam("a")])
        assert sig.names == ["b", "a"]
        assert len(sig) == 2

    def test_rejects_duplicate_names(self):
        with pytest.raises(ValueError, match="Duplicate parameter name: a"):
            MethodSignature([RequiredParam("a"), OptionalParam("a", 1)])

    def test_empty(self):
        assert list(MethodSignature()) == []

    def test_params_compare_by_value(self):
        assert RequiredParam("a", int) == RequiredParam("a", int)
        assert OptionalParam("b", 5) != OptionalParam("b", 6)


@pytest.mark.unit
class TestSignatureFromCallable:
    """Tests for signature_from_callable."""

    def test_required_and_optional(self):
        def handler(a: int, b: str = "x"):
            return None

        sig = signature_from_callable(handler)
        assert sig.params == (RequiredParam("a", int), OptionalParam("b", "x", str))

    def test_unannotated_is_any(self):
        sig = signature_from_callable(lambda value: value)
        assert sig.params == (RequiredParam("value", Any),)

    def test_skips_variadics_and_keyword_defaults(self):
        def handler(a, *args, flag: bool = False, **kwargs):
            return None

        assert signature_from_callable(handler).names == ["a"]

    def test_keyword_only_without_default_rejected(self):
        def handler(a, *, b):
            return None

        with pytest.raises(ValueError, match="Keyword-only"):
            signature_from_callable(handler)

    def test_callable_object(self):
        class Multiply:
            def __call__(self, a: int, b: int) -> int:
                return a * b

        sig = signature_from_callable(Multiply())
        assert sig.names == ["a", "b"]
        assert sig.params[0].annotation is int

    def test_async_handler(self):
        async def handler(a: float) -> float:
            return a

        assert signature_from_callable(handler).params == (RequiredParam("a", float),)


@pytest.mark.unit
class TestReturnType:
    """Tests for return_type_of."""

    def test_declared(self):
        def handler() -> list[int]:
            return []

        assert return_type_of(handler) == list[int]

    def test_undeclared(self):
        assert return_type_of(lambda: 1) is Any


@pytest.mark.unit
class TestCheckArity:
    """Tests for check_arity."""

    def test_matching(self):
        check_arity(lambda a, b: None, MethodSignature([RequiredParam("a"), RequiredParam("b")]))

    def test_variadic_accepts_any(self):
        check_arity(lambda *values: None, MethodSignature([RequiredParam("a")]))

    def test_too_many_params(self):
        with pytest.raises(ValueError, match="does not accept 2 positional arguments"):
            check_arity(lambda a: None, MethodSignature([RequiredParam("a"), RequiredParam("b")]))

    def test_too_few_params(self):
        with pytest.raises(ValueError):
            check_arity(lambda a, b: None, MethodSignature([RequiredParam("a")]))
