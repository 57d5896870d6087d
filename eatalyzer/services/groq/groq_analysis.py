# groq_analysis.py
import json
import logging
import time
from typing import Any, Dict, List, Optional

from openai import OpenAI
from pydantic import ValidationError

from ...config.settings import Config
from ...errors import AnalysisError, ConfigurationError
from ...models.nutrition import NutritionAnalysis
from ...models.session import ImageUpload
from ...prompts.analysis_prompt import build_analysis_prompt
from ...utils.timing import calculate_ms
from ..image_encoder import ImageEncoder

logger = logging.getLogger(__name__)


def make_client(api_key: Optional[str], base_url: str = Config.GROQ_BASE_URL) -> OpenAI:
    """
    Create an OpenAI SDK client for Groq's OpenAI-compatible endpoint.
    Automatic retries are disabled: one click, one HTTP attempt.
    """
    if not api_key:
        raise ConfigurationError("GROQ_API_KEY is required")

    return OpenAI(api_key=api_key, base_url=base_url, max_retries=0)


def extract_text_from_response(response) -> str:
    """
    Extract text from a chat completion response.
    """
    if hasattr(response, 'choices') and response.choices:
        return response.choices[0].message.content or ""
    return ""


class GroqAnalysisClient:
    """
    Sends one meal photo to a vision chat model and parses the reply into a
    NutritionAnalysis.
    """

    def __init__(self,
                 api_key: Optional[str],
                 model: str,
                 base_url: str = Config.GROQ_BASE_URL,
                 temperature: float = 0.2,
                 client: Optional[OpenAI] = None,
                 encoder: Optional[ImageEncoder] = None):
        self.model = model
        self.temperature = temperature
        self.client = client or make_client(api_key, base_url)
        self.encoder = encoder or ImageEncoder()

    @classmethod
    def from_config(cls, config, client: Optional[OpenAI] = None) -> "GroqAnalysisClient":
        return cls(
            api_key=config.get("GROQ_API_KEY"),
            model=config["DEFAULT_MODEL"],
            base_url=config.get("GROQ_BASE_URL", Config.GROQ_BASE_URL),
            temperature=config.get("ANALYSIS_TEMPERATURE", 0.2),
            client=client,
        )

    def build_messages(self, upload: ImageUpload) -> List[Dict[str, Any]]:
        base64_image = self.encoder.to_transport_encoding(upload)
        mime_type = upload.content_type or "image/jpeg"
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": build_analysis_prompt()},
                    {
                        "type": "image_url",
                        "image_url": {"url": f"data:{mime_type};base64,{base64_image}"},
                    },
                ],
            }
        ]

    def analyze(self, upload: ImageUpload) -> NutritionAnalysis:
        """
        Analyze a validated image upload.

        Raises:
            AnalysisError: on any transport, read, or parse failure
        """
        t0 = time.perf_counter()
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=self.build_messages(upload),
                temperature=self.temperature,
                response_format={"type": "json_object"},
            )
            raw = extract_text_from_response(response)
            if not raw:
                raise ValueError("empty completion content")
            analysis = NutritionAnalysis.from_wire(json.loads(raw))
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            logger.error(f"Unusable analysis reply after {calculate_ms(t0)} ms: {e}")
            raise AnalysisError("Failed to analyze food image") from e
        except Exception as e:
            logger.exception(f"Analysis request failed after {calculate_ms(t0)} ms")
            raise AnalysisError("Failed to analyze food image") from e

        logger.info(f"Analysis succeeded in {calculate_ms(t0)} ms: "
                    f"{analysis.calories} kcal, {len(analysis.contents)} items")
        return analysis
