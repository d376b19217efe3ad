"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, ``reachstat.toml`` only holds
overrides. An empty file (or none at all) is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- reachstat.toml sections ---


class SamplingConfig(BaseModel):
    """[sampling] section."""

    model_config = {"frozen": True}

    max_node_bound: int = Field(default=8, ge=0)
    iterations: int = Field(default=10_000, gt=0)
    seed: int | None = None


class ReportConfig(BaseModel):
    """[report] section."""

    model_config = {"frozen": True}

    trace: bool = False
    dump_adjacency: bool = False

