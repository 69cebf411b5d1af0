"""Routing request/response schemas."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class PointModel(BaseModel):
    x: float
    y: float


class RouteRequest(BaseModel):
    points: List[PointModel] = Field(..., description="Points to visit; the first one is the fixed start.")
    algorithm: Optional[Literal["simulated_annealing", "nearest_neighbour"]] = Field(
        default=None,
        description="Heuristic to use. Defaults to the configured default algorithm.",
    )
    annealing_steps: Optional[int] = Field(default=None, ge=1)
    direction: Optional[Literal["east", "south", "west", "north", "any"]] = Field(
        default=None,
        description="Preferred heading for nearest neighbour search.",
    )
    closed: Optional[bool] = Field(default=None, description="Include the return edge to the start point.")
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible annealing run.")
    persist: bool = False
    run_label: Optional[str] = Field(default=None, description="Friendly name for persisted outputs.")


class RouteResponse(BaseModel):
    algorithm: str
    closed: bool
    path_length: float
    order: List[int]
    points: List[PointModel]
    metadata: dict
