from .responses import ErrorMessage, FormatResult, PipelineInfo, PipelineList

__all__ = ["ErrorMessage", "FormatResult", "PipelineInfo", "PipelineList"]
