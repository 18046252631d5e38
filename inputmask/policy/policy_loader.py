"""Policy loading utilities for mask scoring and defaults."""

from __future__ import annotations

from pathlib import Path

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from inputmask.policy.models import MaskPolicy


def default_policy_path() -> Path:
    return Path(__file__).with_name("policy.yaml")


def load_policy(path: Path | None = None) -> MaskPolicy:
    """Load and validate mask policy from YAML."""

    policy_path = path or default_policy_path()

    try:
        raw = yaml.safe_load(policy_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"Policy file not found: {policy_path}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in policy file: {policy_path}") from exc

    if raw is None:
        return MaskPolicy()

    if not isinstance(raw, dict):
        raise ValueError(f"Policy file must contain a mapping: {policy_path}")

    try:
        return MaskPolicy.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid policy schema: {policy_path}") from exc
