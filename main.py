from fastapi import FastAPI, WebSocket, WebSocketDisconnect
import uvicorn
import json
import logging
from prompter import ClassifierBuilder, load_config
from prompter.classifier import trim
from prompter.models import ConfigResponse, EvaluateRequest, EvaluateResponse, OutcomeMessage

config = load_config()

logging.basicConfig(level=config.log_level)
logger = logging.getLogger(__name__)

app = FastAPI()


def on_command_state_change(started: bool):
    logger.info(f"Command mode {'started' if started else 'stopped'}")


def on_suggestion_state_change(started: bool):
    logger.info(f"Suggestion mode {'started' if started else 'stopped'}")


# Shared by every connection
classifier = (
    ClassifierBuilder.from_config(config)
    .with_log_handler(logger.info)
    .with_command_handler(on_command_state_change)
    .with_suggestion_handler(on_suggestion_state_change)
    .build()
)


def evaluate_line(text: str) -> EvaluateResponse:
    outcome = classifier.evaluate(text)
    return EvaluateResponse(
        outcome=outcome,
        text=trim(text),
        in_command_mode=classifier.in_command_mode
    )


@app.get("/api/config")
async def get_config() -> ConfigResponse:
    return ConfigResponse(command_prefixes=sorted(classifier.command_prefixes))


@app.post("/api/evaluate")
async def evaluate(request: EvaluateRequest) -> EvaluateResponse:
    """Classify a single line of text."""
    return evaluate_line(request.text)


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    await websocket.accept()
    try:
        while True:
            data = await websocket.receive_text()
            try:
                result = evaluate_line(data)
                message = OutcomeMessage(**result.model_dump())
                await websocket.send_text(message.to_json())
            except WebSocketDisconnect:
                raise
            except Exception as e:
                logger.error(f"Error evaluating line: {e}")
                await websocket.send_text(json.dumps({
                    "type": "error",
                    "text": f"Evaluation error: {str(e)}"
                }))
    except WebSocketDisconnect:
        logger.info("Client disconnected")


if __name__ == "__main__":
    uvicorn.run("main:app", host=config.host, port=config.port, reload=True)
