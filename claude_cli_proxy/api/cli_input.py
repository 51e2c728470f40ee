import logging

from fastapi import APIRouter

from ..models.api_models import ModelCard, ModelList, OpenAIChatRequest
from ..services.conversion import MODEL_MAP, list_model_ids, openai_to_cli
from ..utils.helpers import error_response, json_response, new_request_id

logger = logging.getLogger("ClaudeCliProxy.Routers.CliInput")
router = APIRouter()


@router.post("/v1/cli-input", summary="Preview the Claude CLI input for an OpenAI chat request", tags=["Conversion"])
async def preview_cli_input(request_data: OpenAIChatRequest):
    request_id = new_request_id()
    logger.info(
        f"RID-{request_id}: Received /v1/cli-input request: Model='{request_data.model}', "
        f"Messages={len(request_data.messages)}, HasSession={request_data.user is not None}"
    )

    try:
        cli_input = openai_to_cli(request_data)
    except Exception as e:
        logger.error(f"RID-{request_id}: Conversion failed: {e}", exc_info=True)
        return error_response(500, f"Failed to convert request: {e}", request_id=request_id)

    logger.info(
        f"RID-{request_id}: Resolved model '{request_data.model}' -> '{cli_input.model}', "
        f"prompt_chars={len(cli_input.prompt)}, "
        f"system_prompt={'yes' if cli_input.system_prompt is not None else 'no'}"
    )
    return json_response(cli_input.to_payload())


@router.get("/v1/models", summary="List model ids accepted by the proxy", tags=["Conversion"])
async def list_models():
    models = ModelList(data=[ModelCard(id=model_id, alias=MODEL_MAP[model_id]) for model_id in list_model_ids()])
    return json_response(models.model_dump())
