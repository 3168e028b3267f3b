from pydantic import BaseModel

from prompter.types import EvaluationOutcome


class EvaluateRequest(BaseModel):
    text: str


class EvaluateResponse(BaseModel):
    outcome: EvaluationOutcome
    text: str
    in_command_mode: bool

    def to_json(self) -> str:
        return self.model_dump_json()


class OutcomeMessage(EvaluateResponse):
    """WebSocket frame sent back for every evaluated line."""
    type: str = "outcome"


class ConfigResponse(BaseModel):
    command_prefixes: list[str]
