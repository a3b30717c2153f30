"""Resolve `module:QualName` paths to record types."""

from __future__ import annotations

import importlib
from typing import Any

from .dataclass_introspection import DataclassDescriptorProvider
from .descriptor_models import TypeDescriptorProvider


class TypeResolutionError(Exception):
    """Raised when a type path cannot be resolved to a record type."""


def resolve_record_type(
    type_path: str, *, provider: TypeDescriptorProvider | None = None
) -> Any:
    """Import and return the record type named by `type_path`.

    Args:
      type_path: `package.module:ClassName`; nested classes use dots after the colon.
      provider: Decides whether the resolved object is a record type.

    Raises:
      TypeResolutionError: If the path is malformed, the module cannot be imported,
        the attribute is missing, or it is not a record type.
    """
    module_name, separator, qualified_name = type_path.strip().partition(":")
    if not separator or not module_name or not qualified_name:
        raise TypeResolutionError(
            f"Type path must look like 'package.module:ClassName', got: {type_path!r}"
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise TypeResolutionError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in qualified_name.split("."):
        try:
            target = getattr(target, attribute)
        except AttributeError as exc:
            raise TypeResolutionError(
                f"Module '{module_name}' has no attribute '{qualified_name}'."
            ) from exc

    record_provider = provider or DataclassDescriptorProvider()
    if not record_provider.is_record(target):
        raise TypeResolutionError(f"'{type_path}' is not a dataclass type.")
    return target
