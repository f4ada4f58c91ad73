from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class FormatResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "format_result"
    text: str
    pipelines: list[str]
    input_chars: int
    output_chars: int
    success: bool = True


class PipelineInfo(BaseModel):
    name: str
    steps: int
    enabled_steps: int
    stop_on_error: bool


class PipelineList(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "pipelines"
    pipelines: list[PipelineInfo]


class ErrorMessage(BaseModel):
    model_config = ConfigDict(extra="allow")

    type: str = "error"
    message: str
    pipeline: str | None = None
    stage: str | None = None
    step_index: int | None = None
    success: bool = False
