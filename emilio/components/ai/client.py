# emilio/components/ai/client.py
import asyncio
import random  # For jitter in retries
from typing import Dict, Any, Optional

import google.generativeai as genai
from google.generativeai.types import GenerationConfig

from pydantic import BaseModel, Field

from emilio.components.ai.images import ImageInput
from emilio.constants import GEMINI_MODEL, GEMINI_MAX_TOKENS, GEMINI_TEMPERATURE
from emilio.utils.logging import get_logger

logger = get_logger(__name__)


class GeminiRequest(BaseModel):
    prompt: str
    system_instruction: Optional[str] = None
    image: Optional[ImageInput] = None
    temperature: float = Field(default=GEMINI_TEMPERATURE)
    max_output_tokens: int = Field(default=GEMINI_MAX_TOKENS)


class GeminiResponse(BaseModel):
    text: str
    raw_response: Dict[str, Any]


class GeminiClient:
    def __init__(self, api_key: Optional[str] = None, model_name: str = GEMINI_MODEL):
        self.model_name = model_name
        self._models: Dict[Optional[str], Any] = {}
        self._setup_client(api_key)

    def _setup_client(self, api_key: Optional[str]):
        if api_key is None:
            from emilio.config import config_manager
            api_key = config_manager.config.api.gemini_api_key
        if not api_key:
            logger.error("Gemini API key is not configured.")
            raise ValueError("Gemini API key is not configured. Run 'emilio init' or set GEMINI_API_KEY.")

        genai.configure(api_key=api_key)
        logger.debug(f"Gemini API client initialized with model: {self.model_name}")

    def _model_for(self, system_instruction: Optional[str]):
        # One model object per distinct system prompt
        if system_instruction not in self._models:
            if system_instruction:
                self._models[system_instruction] = genai.GenerativeModel(
                    self.model_name, system_instruction=system_instruction
                )
            else:
                self._models[system_instruction] = genai.GenerativeModel(self.model_name)
        return self._models[system_instruction]

    @staticmethod
    def _build_contents(request: GeminiRequest) -> list:
        contents: list = [request.prompt]
        if request.image is not None:
            contents.append(request.image.as_blob())
        return contents

    async def generate_text(self, request: GeminiRequest) -> GeminiResponse:
        max_retries = 1
        base_delay = 2
        last_exception = None

        for attempt in range(max_retries + 1):
            try:
                logger.debug(
                    f"GEMINI API REQUEST (Attempt {attempt + 1}/{max_retries + 1}) "
                    f"PROMPT ({len(request.prompt)} chars, image: {request.image is not None})"
                )

                generation_config = GenerationConfig(
                    temperature=request.temperature,
                    max_output_tokens=request.max_output_tokens,
                )

                model = self._model_for(request.system_instruction)
                response_obj = await asyncio.to_thread(
                    model.generate_content,
                    self._build_contents(request),
                    generation_config=generation_config,
                )

                prompt_feedback = getattr(response_obj, 'prompt_feedback', None)
                if prompt_feedback and getattr(prompt_feedback, 'block_reason', None):
                    error_message = f"Prompt blocked by API safety filters: {prompt_feedback.block_reason}"
                    logger.error(error_message)
                    raise ValueError(error_message)

                response_text_content = ""
                if getattr(response_obj, 'text', None):
                    response_text_content = response_obj.text
                elif getattr(response_obj, 'parts', None):
                    response_text_content = "".join(
                        part.text for part in response_obj.parts if hasattr(part, 'text')
                    )

                if not response_text_content:
                    logger.error("Empty response content from Gemini API.")
                    raise ValueError("Empty response from Gemini API (no text or parts with text).")

                raw_response_data: Dict[str, Any] = {"text_content_from_api": response_text_content}
                candidates = getattr(response_obj, 'candidates', None)
                if candidates:
                    candidate_one = candidates[0]
                    if hasattr(candidate_one, 'to_dict'):
                        raw_response_data = candidate_one.to_dict()
                    elif isinstance(candidate_one, dict):
                        raw_response_data = candidate_one

                result = GeminiResponse(text=response_text_content, raw_response=raw_response_data)
                logger.debug(f"Gemini API response received. Length: {len(result.text)}")
                return result

            except ValueError as ve:
                logger.warning(f"ValueError during Gemini API call (Attempt {attempt + 1}/{max_retries + 1}): {ve}")
                last_exception = ve
                if attempt == max_retries:
                    raise

            except Exception as e:
                logger.warning(
                    f"Error calling Gemini API (Attempt {attempt + 1}/{max_retries + 1}): {type(e).__name__} - {e}"
                )
                last_exception = e
                if attempt == max_retries:
                    logger.exception(f"Final attempt failed calling Gemini API: {e}")
                    raise RuntimeError(
                        f"Failed to generate text with Gemini API after {max_retries + 1} attempts: {e}"
                    ) from e

            delay = base_delay * (2 ** attempt) + random.uniform(0, 0.5)
            logger.info(
                f"Retrying Gemini API call in {delay:.2f} seconds due to: "
                f"{type(last_exception).__name__} - {last_exception}"
            )
            await asyncio.sleep(delay)

        raise RuntimeError(f"Max retries ({max_retries}) exceeded for Gemini API call.")
