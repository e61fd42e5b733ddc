"""
Module for summarizing transcripts using LLM models.
"""

from typing import Optional

from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from app.config import config
from app.core.prompts import summary_system_template, summary_user_template
from app.utils.error_handling import (
    AuthenticationError,
    MissingInputError,
    UpstreamServiceError,
    describe_provider_exception,
)
from app.utils.logger import logging


class TranscriptSummarizer:
    """Class to handle transcript summarization operations."""

    response_format = {"type": "json_object"}

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ):
        """
        Initialize the summarizer.

        Args:
            model: Chat model name (defaults to the configured DeepSeek model)
            temperature: Sampling temperature
            max_tokens: Upper bound on the completion length
        """
        self.model = model or config.DEFAULT_SUMMARY_MODEL
        self.temperature = config.SUMMARY_TEMPERATURE if temperature is None else temperature
        self.max_tokens = max_tokens or config.SUMMARY_MAX_TOKENS

        self.prompt = ChatPromptTemplate.from_messages([
            ("system", summary_system_template),
            ("human", summary_user_template),
        ])

    @staticmethod
    def resolve_api_key(custom_api_key: Optional[str] = None) -> str:
        if custom_api_key and custom_api_key.strip():
            return custom_api_key.strip()
        if config.DEEPSEEK_API_KEY:
            return config.DEEPSEEK_API_KEY

        logging.error("Summarization API key is missing")
        raise AuthenticationError("API configuration error - Missing API key")

    def _build_llm(self, api_key: str):
        # ChatDeepSeek reads DEEPSEEK_API_BASE from the environment and sends max_tokens as-is
        llm = init_chat_model(
            model=self.model,
            model_provider="deepseek",
            api_key=api_key,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            max_retries=0,
            timeout=config.REQUEST_TIMEOUT,
        )
        return llm.bind(response_format=self.response_format)

    def summarize(self, transcript: str, custom_api_key: Optional[str] = None) -> str:
        """
        Summarize a transcript text.

        Args:
            transcript: Full transcript text to summarize
            custom_api_key: Caller supplied DeepSeek key

        Returns:
            Raw completion text, expected to be the summary JSON
        """
        if not transcript or not transcript.strip():
            raise MissingInputError("Transcript is required")

        api_key = self.resolve_api_key(custom_api_key)
        llm = self._build_llm(api_key)
        messages = self.prompt.format_messages(transcript=transcript)

        logging.info(f"Requesting summary from {self.model} for transcript of {len(transcript)} chars")
        try:
            response = llm.invoke(messages)
        except Exception as e:
            message = describe_provider_exception(e)
            logging.error(f"Summary request failed: {message}")
            raise UpstreamServiceError("Summary generation failed", details=message) from e

        logging.info("Summary generated successfully")
        return response.content
