"""Thread-safe registry of compiled masks keyed by format string."""

from __future__ import annotations

import json
import logging
import threading
from typing import Any

from inputmask.masks.mask import Mask
from inputmask.policy.models import MaskPolicy
from inputmask.policy.policy_loader import load_policy
from inputmask.utils.errors import FormatError

logger = logging.getLogger("inputmask.registry")


class MaskRegistry:
    """Caches one compiled ``Mask`` per format for the registry's lifetime.

    Rules:
    - Lookup and insert happen under one lock, so concurrent first requests
      for a format compile it once and all receive the same instance.
    - Formats that fail to compile are never cached.
    - Entries are never evicted.
    """

    def __init__(self, policy: MaskPolicy | None = None) -> None:
        self.policy = policy or MaskPolicy()
        self._masks: dict[str, Mask] = {}
        self._lock = threading.Lock()

    def get_or_create(self, format: str) -> Mask:
        """Return the cached mask for ``format``, compiling it on first use."""

        with self._lock:
            mask = self._masks.get(format)
            if mask is not None:
                return mask

            try:
                mask = Mask(format, affinity=self.policy.affinity)
            except FormatError as exc:
                _log_event(logging.WARNING, "format_error", format=format, reason=str(exc))
                raise

            self._masks[format] = mask

        _log_event(
            logging.DEBUG,
            "compiled",
            format=format,
            max_text_length=mask.max_text_length,
            max_value_length=mask.max_value_length,
        )
        return mask

    def clear(self) -> None:
        with self._lock:
            self._masks.clear()

    def __contains__(self, format: object) -> bool:
        with self._lock:
            return format in self._masks

    def __len__(self) -> int:
        with self._lock:
            return len(self._masks)


_default_registry_lock = threading.Lock()
_default_registry: MaskRegistry | None = None


def default_registry() -> MaskRegistry:
    """Return the process-wide registry, configured from the default policy."""

    global _default_registry
    with _default_registry_lock:
        if _default_registry is None:
            _default_registry = MaskRegistry(load_policy())
        return _default_registry


def reset_default_registry() -> None:
    global _default_registry
    with _default_registry_lock:
        _default_registry = None


def get_or_create_cached_mask(format: str) -> Mask:
    return default_registry().get_or_create(format)


def _log_event(level: int, event: str, **fields: Any) -> None:
    payload = {"event": event, **fields}
    logger.log(level, json.dumps(payload, ensure_ascii=False, separators=(",", ":")))
