# -*- coding: utf-8 -*-
"""Health log — Pydantic models."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class HealthRecord(BaseModel):
    """One form submission. Wire names are the form's field names."""

    # Callers may attach fields of their own; they are kept on the entry.
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True)

    # Basic info
    date: Optional[str] = Field(None, alias="Date", description="YYYY-MM-DD")
    time: Optional[str] = Field(None, alias="Time", description="HH:MM")

    # Nutrition
    food_item: Optional[str] = Field(None, alias="Food_Item")
    quantity: Optional[str] = Field(None, alias="Quantity")
    calories: Optional[str] = Field(None, alias="Calories")
    meal_time: Optional[str] = Field(None, alias="Meal_Time")

    # Vitals
    bp_systolic: Optional[str] = Field(None, alias="BP_Systolic")
    bp_diastolic: Optional[str] = Field(None, alias="BP_Diastolic")
    sugar_level: Optional[str] = Field(None, alias="Sugar_Level")
    weight: Optional[str] = Field(None, alias="Weight")
    waist_circumference: Optional[str] = Field(None, alias="Waist_Circumference")

    notes: Optional[str] = Field(None, alias="Notes")


class StoredLogEntry(HealthRecord):
    model_config = ConfigDict(extra="allow", coerce_numbers_to_str=True, frozen=True)

    id: str = Field(..., description="Milliseconds since the epoch at insertion")
    timestamp: str = Field(..., description="ISO8601 UTC insertion time")


class SubmitLogResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    message: str = "Health data logged successfully!"
    data: StoredLogEntry
    total_logs: int = Field(..., alias="totalLogs", ge=0)


class LogListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    logs: List[StoredLogEntry] = Field(default_factory=list)
    total_logs: int = Field(..., alias="totalLogs", ge=0)
