"""Base tool class for scoring tools."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional


@dataclass
class ToolResult:
    """Result from a tool execution."""
    success: bool
    output: str
    error: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)

    def to_message(self) -> str:
        if self.success:
            return self.output
        return f"Error: {self.error}\n{self.output}" if self.output else f"Error: {self.error}"


class ToolInputError(Exception):
    """A tool input file is missing, unreadable, empty or not valid JSON."""


class BaseTool(ABC):
    """Base class for all tools."""

    name: str
    description: str
    parameters: Dict[str, Any]

    def __init__(self, workspace_dir: str = "."):
        self.workspace_dir = Path(workspace_dir).resolve()

    @abstractmethod
    async def execute(self, **kwargs) -> ToolResult:
        """Execute the tool with given parameters."""
        pass

    def to_schema(self) -> Dict[str, Any]:
        """Convert tool to OpenAI/Anthropic function schema."""
        return {
            "type": "function",
            "function": {
                "name": self.name,
                "description": self.description,
                "parameters": {
                    "type": "object",
                    "properties": self.parameters,
                    "required": [k for k, v in self.parameters.items() if v.get("required", False)],
                },
            },
        }

    def _resolve_path(self, path: str) -> Path:
        p = Path(path)
        if p.is_absolute():
            return p
        return self.workspace_dir / p

    def _load_json(self, path: str) -> Any:
        file_path = self._resolve_path(path)
        if not file_path.exists():
            raise ToolInputError(f"File not found: {path}")
        try:
            text = file_path.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as e:
            raise ToolInputError(f"Cannot read {path}: {e}") from e
        if not text.strip():
            raise ToolInputError(f"File is empty: {path}")
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise ToolInputError(f"Invalid JSON in {path}: {e.msg} (line {e.lineno})") from e
