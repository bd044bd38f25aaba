"""Resume Scorer Tools - file-based wrappers around the scoring domain."""

from .base import BaseTool, ToolInputError, ToolResult
from .scoring_tools import ATSScoreTool, SalaryEstimateTool, SkillsGapTool

__all__ = [
    "BaseTool",
    "ToolResult",
    "ToolInputError",
    "ATSScoreTool",
    "SkillsGapTool",
    "SalaryEstimateTool",
]
