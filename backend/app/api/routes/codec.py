"""
API routes for Base64 encoding and decoding
"""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends
from pydantic import BaseModel, ConfigDict, Field

from app.core.auth import require_api_key
from app.core.config import Settings, get_settings
from app.core.logging_config import LoggingConfig
from app.services.codec_service import CodecService

router = APIRouter(tags=["codec"], dependencies=[Depends(require_api_key)])
logger = LoggingConfig.get_logger(__name__)


class EncodeRequest(BaseModel):
    """Request model for encoding"""
    model_config = ConfigDict(extra="ignore")

    input: Optional[Any] = Field(None, description="The plain text to encode")


class DecodeRequest(BaseModel):
    """Request model for decoding"""
    model_config = ConfigDict(extra="ignore")

    input: Optional[Any] = Field(None, description="The Base64 encoded text")


class CodecResponse(BaseModel):
    """Transformed text"""
    output: str


class MessageResponse(BaseModel):
    """Error or informational message"""
    message: str


ERROR_RESPONSES = {
    400: {"model": MessageResponse, "description": "Missing or invalid input"},
    401: {"model": MessageResponse, "description": "Missing or invalid API key"},
}


def get_codec_service(settings: Settings = Depends(get_settings)) -> CodecService:
    """Codec service configured from settings"""
    return CodecService(strict=settings.strict_base64)


@router.post(
    "/encode",
    response_model=CodecResponse,
    responses=ERROR_RESPONSES,
    summary="Base64 encode a plain text",
)
async def encode_text(
    payload: Optional[EncodeRequest] = Body(None),
    codec: CodecService = Depends(get_codec_service),
):
    """Encode the `input` text as standard Base64"""
    text = codec.require_input(payload.input if payload else None)
    return CodecResponse(output=codec.encode(text))


@router.post(
    "/decode",
    response_model=CodecResponse,
    responses=ERROR_RESPONSES,
    summary="Base64 decode an encoded text",
)
async def decode_text(
    payload: Optional[DecodeRequest] = Body(None),
    codec: CodecService = Depends(get_codec_service),
):
    """Decode the Base64 `input` back into UTF-8 text"""
    encoded = codec.require_input(payload.input if payload else None)
    output = codec.decode(encoded)
    logger.debug("Decoded %d characters", len(encoded), extra={"strict": codec.strict})
    return CodecResponse(output=output)
