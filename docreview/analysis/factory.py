from typing import ClassVar

from docreview.analysis.client import AnalysisClient
from docreview.analysis.client_base import BaseAnalysisClient
from docreview.analysis.example_client_adapter import ExampleClientAdapter
from docreview.analysis.gemini_client_adapter import GeminiClientAdapter
from docreview.analysis.openai_client_adapter import OpenAIClientAdapter
from docreview.config.settings import Settings
from docreview.prompts.catalog import PromptCatalog


class AnalysisClientFactory:
    """Creates the configured analysis client. The only place credentials are read."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
    }
    PROVIDERS: ClassVar[tuple[str, ...]] = (
        "example",
        "gemini",
        "openai",
        "openai_compatible",
        "openrouter",
    )

    @classmethod
    def create(
        cls,
        settings: Settings,
        catalog: PromptCatalog | None = None,
    ) -> AnalysisClient:
        """Create a configured analysis client from application settings."""
        provider = settings.analysis_provider.lower()
        if provider not in cls.PROVIDERS:
            raise ValueError(
                f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
            )
        if provider == "example":
            adapter: BaseAnalysisClient = ExampleClientAdapter.from_catalog(
                catalog if catalog is not None else PromptCatalog()
            )
            return AnalysisClient(adapter=adapter, model="example")

        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            raise ValueError(
                f"analysis_{provider}_api_key is required for analysis_provider={provider}"
            )
        if provider == "gemini":
            adapter = GeminiClientAdapter(
                api_key=api_key,
                timeout_seconds=settings.analysis_gemini_timeout_seconds,
            )
        else:
            adapter = OpenAIClientAdapter(
                api_key=api_key,
                timeout_seconds=cls._resolve_timeout_seconds(provider, settings),
                base_url=cls._resolve_base_url(provider, settings),
            )
        return AnalysisClient(
            adapter=adapter,
            model=cls._resolve_model_name(provider, settings),
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.analysis_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "analysis_openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        return cls.OPENAI_COMPATIBLE_BASE_URLS[provider]

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.analysis_gemini_api_key,
            "openai": settings.analysis_openai_api_key,
            "openai_compatible": settings.analysis_openai_compatible_api_key,
            "openrouter": settings.analysis_openrouter_api_key,
        }
        return key_map.get(provider, "")

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.analysis_gemini_model_name,
            "openai": settings.analysis_openai_model_name,
            "openai_compatible": settings.analysis_openai_compatible_model_name,
            "openrouter": settings.analysis_openrouter_model_name,
        }
        model = key_map.get(provider, "")
        if not model:
            raise ValueError(
                f"analysis_{provider}_model_name is required for analysis_provider={provider}"
            )
        return model

    @classmethod
    def _resolve_timeout_seconds(cls, provider: str, settings: Settings) -> int:
        key_map = {
            "openai": settings.analysis_openai_timeout_seconds,
            "openai_compatible": settings.analysis_openai_compatible_timeout_seconds,
            "openrouter": settings.analysis_openrouter_timeout_seconds,
        }
        return key_map.get(provider, 120)
