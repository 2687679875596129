"""One-shot backfill of unset configuration fields from a defaults table."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Final

from pydantic import BaseModel

from .enums import ReconcilerState
from .logging import get_logger

logger = get_logger(__name__)

MergeCallback = Callable[[dict[str, Any]], Any]


class _Undefined:
    """Marker for a field that is present but explicitly undefined.

    Unlike ``None`` it is never replaced by a default.
    """

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED: Final = _Undefined()


def _as_mapping(config: Mapping[str, Any] | BaseModel) -> Mapping[str, Any]:
    if isinstance(config, BaseModel):
        # Iterating a model yields (field, value) pairs without dumping nested models.
        return dict(config)
    return config


def merge_null_defaults(
    config: Mapping[str, Any] | BaseModel, defaults: Mapping[str, Any]
) -> dict[str, Any]:
    """Return a shallow copy of *config* with ``None`` fields taken from *defaults*.

    Only keys holding exactly ``None`` are replaced. Absent keys and
    :data:`UNDEFINED` values are left alone, as are keys that *defaults*
    does not mention.
    """

    source = _as_mapping(config)
    merged = dict(source)
    for key, value in defaults.items():
        if key in source and source[key] is None:
            merged[key] = value
    return merged


class DefaultValuesReconciler:
    """Backfills defaults into a panel's configuration at most once.

    A reconciler starts ``PENDING``. The first :meth:`reconcile` call merges,
    reports the result and moves to ``SETTLED``; every later call is a no-op.
    Create one instance per panel session.
    """

    def __init__(self) -> None:
        self._state = ReconcilerState.PENDING

    @property
    def state(self) -> ReconcilerState:
        return self._state

    @property
    def is_settled(self) -> bool:
        return self._state is ReconcilerState.SETTLED

    def reconcile(
        self,
        config: Mapping[str, Any] | BaseModel,
        defaults: Mapping[str, Any],
        on_complete: MergeCallback,
    ) -> bool:
        """Merge *defaults* into *config* unless already settled.

        Returns ``True`` when the merge ran and *on_complete* was called.
        """

        if self._state is ReconcilerState.SETTLED:
            return False

        source = _as_mapping(config)
        filled = sorted(
            key for key in defaults if key in source and source[key] is None
        )
        merged = merge_null_defaults(source, defaults)
        on_complete(merged)
        self._state = ReconcilerState.SETTLED
        logger.debug("defaults_reconciled", filled=filled)
        return True
