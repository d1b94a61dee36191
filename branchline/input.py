"""Status line input descriptor.

Contains:
- StatusLineInput: Pydantic model of the JSON object read from stdin
- InputError: Raised when the descriptor cannot be read or parsed
- parse_input: Validate raw stdin text into a StatusLineInput
"""

from typing import Annotated

from pydantic import BaseModel, BeforeValidator, Field, ValidationError


# JSON null is accepted wherever a string is expected
Text = Annotated[str, BeforeValidator(lambda v: "" if v is None else v)]


class InputError(Exception):
    """Raised when the stdin descriptor is missing or malformed."""

    pass


class ModelInfo(BaseModel):
    id: Text = ""
    display_name: Text = ""


class WorkspaceInfo(BaseModel):
    current_dir: Text = ""
    project_dir: Text = ""


class OutputStyle(BaseModel):
    name: Text = ""


class StatusLineInput(BaseModel):
    """Session and workspace context sent by the assistant shell.

    Unknown fields are ignored so newer shells keep working.
    """

    session_id: Text = ""
    transcript_path: Text = ""
    cwd: Text = ""
    model: ModelInfo = Field(default_factory=ModelInfo)
    workspace: WorkspaceInfo = Field(default_factory=WorkspaceInfo)
    version: Text = ""
    output_style: OutputStyle = Field(default_factory=OutputStyle)

    @property
    def project_dir(self) -> str:
        """The project directory, or "" when unset (the shell may send "null")."""
        project_dir = self.workspace.project_dir
        return "" if project_dir == "null" else project_dir


def parse_input(raw: str) -> StatusLineInput:
    """Parse the stdin descriptor.

    Args:
        raw: The full text read from stdin.

    Returns:
        The validated StatusLineInput.

    Raises:
        InputError: If the text is not a JSON object of the expected shape.
    """
    if not raw.strip():
        raise InputError("No input received on stdin")

    try:
        return StatusLineInput.model_validate_json(raw)
    except ValidationError as e:
        raise InputError(f"Invalid status line input: {e}")
