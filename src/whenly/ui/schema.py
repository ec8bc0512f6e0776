"""Pydantic models for the CLI's JSON output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field

from whenly.domain.model import ClearResult, DateResult, PeriodResult

if TYPE_CHECKING:
    from whenly.app import Resolution
    from whenly.domain.model import ParsedDate


class WhenlyBaseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class DatePayload(WhenlyBaseModel):
    kind: Literal["date"] = "date"
    date: str


class PeriodPayload(WhenlyBaseModel):
    kind: Literal["period"] = "period"
    granularity: Literal["day", "week", "month", "year"]
    start: str
    end: str


class ClearPayload(WhenlyBaseModel):
    kind: Literal["clear"] = "clear"


class ResolutionPayload(WhenlyBaseModel):
    text: str
    reference: str
    description: str
    result: Annotated[DatePayload | PeriodPayload | ClearPayload, Field(discriminator="kind")]


def result_payload(parsed: ParsedDate) -> DatePayload | PeriodPayload | ClearPayload:
    match parsed:
        case DateResult(date=value):
            return DatePayload(date=value.isoformat())
        case PeriodResult(period=period):
            return PeriodPayload(
                granularity=period.granularity.value,
                start=period.start.isoformat(),
                end=period.end().isoformat(),
            )
        case ClearResult():
            return ClearPayload()


def resolution_payload(resolution: Resolution) -> ResolutionPayload:
    return ResolutionPayload(
        text=resolution.text,
        reference=resolution.reference.isoformat(),
        description=resolution.description,
        result=result_payload(resolution.parsed),
    )
