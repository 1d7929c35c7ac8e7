"""Parameter descriptors, method signatures and argument binding."""

from .binder import Args, bind_arguments, conversion_diagnostic
from .introspect import check_arity, return_type_of, signature_from_callable
from .types import MethodSignature, OptionalParam, ParamSpec, RequiredParam

__all__ = [
    # Descriptors
    "RequiredParam",
    "OptionalParam",
    "ParamSpec",
    "MethodSignature",
    # Binding
    "Args",
    "bind_arguments",
    "conversion_diagnostic",
    # Introspection
    "signature_from_callable",
    "return_type_of",
    "check_arity",
]
