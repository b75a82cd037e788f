"""AI text generation through Gemini.

Every public method returns text. Missing configuration and SDK failures
become apology messages instead of exceptions.
"""

import logging
from typing import Iterable, Protocol

from google import genai
from google.genai import types

from smartcal.summary import format_event_line

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-2.5-flash"

MISSING_KEY_MESSAGE = "API Key가 설정되지 않았습니다. 환경 변수를 확인해주세요."
CHAT_FAILED_MESSAGE = "요청을 처리하는 중에 오류가 발생했습니다."
CHAT_EMPTY_MESSAGE = "죄송합니다. 답변을 생성할 수 없습니다."
SUMMARY_FAILED_MESSAGE = "AI 브리핑 생성 중 오류가 발생했습니다."
SUMMARY_EMPTY_MESSAGE = "브리핑을 생성할 수 없습니다."


class TextProvider(Protocol):
    def summarize(self, events: Iterable, period_label: str) -> str:
        ...

    def chat(self, prompt: str, context_label: str) -> str:
        ...


def build_summary_prompt(events: Iterable, period_label: str) -> str:
    event_list = "\n".join(format_event_line(e) for e in events)
    return (
        f"다음은 사용자의 {period_label} 일정 목록입니다:\n"
        f"{event_list or '등록된 일정이 없습니다.'}\n\n"
        "이 일정들을 분석하여 다음 내용을 포함한 짧고 친절한 브리핑을 작성해주세요:\n"
        "1. 이번 달의 전체적인 바쁨 정도 (상/중/하)\n"
        "2. 가장 일정이 몰려있는 시기나 중요한 특징\n"
        "3. 생산성을 높이기 위한 조언이나 격려의 말\n\n"
        "답변은 한국어로, 친근한 말투(~해요)를 사용해 마크다운 형식으로 작성해주세요."
    )


def build_system_instruction(context_label: str) -> str:
    return (
        "당신은 달력 앱의 친절하고 유능한 AI 비서입니다.\n"
        "사용자의 일정 계획, 휴일 여행 추천, 기념일 축하 메시지 작성 등을 도와줍니다.\n"
        f"현재 사용자가 보고 있는 달력의 기준 날짜는 {context_label}입니다.\n"
        "한국의 문화와 휴일 맥락을 잘 이해하고 답변해주세요.\n"
        "답변은 마크다운 형식을 사용하여 깔끔하게 정리해주세요."
    )


class GeminiTextProvider:
    """Summaries and chat answers from a Gemini model."""

    def __init__(
        self,
        api_key: str | None,
        model: str = DEFAULT_MODEL,
        client: "genai.Client | None" = None,
    ):
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def _generate(self, contents: str, config: types.GenerateContentConfig) -> str | None:
        response = self.client.models.generate_content(
            model=self.model, contents=contents, config=config
        )
        return response.text

    def summarize(self, events: Iterable, period_label: str) -> str:
        """Write a short monthly briefing for ``events``."""
        if not self.api_key and self._client is None:
            return MISSING_KEY_MESSAGE
        prompt = build_summary_prompt(events, period_label)
        try:
            text = self._generate(prompt, types.GenerateContentConfig(temperature=0.6))
        except Exception as e:
            logger.error(f"Gemini summary failed: {e}")
            return SUMMARY_FAILED_MESSAGE
        return text or SUMMARY_EMPTY_MESSAGE

    def chat(self, prompt: str, context_label: str) -> str:
        """Answer a free-form question about the calendar."""
        if not self.api_key and self._client is None:
            return MISSING_KEY_MESSAGE
        config = types.GenerateContentConfig(
            system_instruction=build_system_instruction(context_label),
            temperature=0.7,
        )
        try:
            text = self._generate(prompt, config)
        except Exception as e:
            logger.error(f"Gemini API error: {e}")
            return CHAT_FAILED_MESSAGE
        return text or CHAT_EMPTY_MESSAGE
