# services/prompt_builder.py
from typing import List, Tuple

from schemas.news_analysis import MediaBias
from services.media_sources import get_bias_label


MAX_ARTICLE_KEYWORDS = 5
MAX_ARTICLE_EVIDENCE = 3


# The response parser relies on the model at least trying to follow this shape.
SEARCH_SYSTEM_PROMPT = f"""한국 뉴스 검색 전문가. 실제 기사만 찾아서 간결한 JSON으로 응답.

규칙:
1. 실제 존재하는 기사만
2. JSON만 출력 (설명 금지)
3. 모든 텍스트 최대한 짧게
4. 완전한 JSON 필수

형식:
{{
  "articles": [
    {{
      "title": "제목",
      "source": "언론사",
      "url": "https://...",
      "publishedDate": "YYYY-MM-DD",
      "keywords": ["키워드1", "키워드2", "키워드3"],
      "mainClaim": "핵심 주장 1문장",
      "evidence": ["근거1", "근거2"],
      "summary": "요약 2문장"
    }}
  ],
  "commonKeywords": ["공통키워드1", "공통키워드2", "공통키워드3"],
  "overallTrend": "전반적 논조 2문장"
}}

중요:
- 기사 3-4개만
- keywords 최대 {MAX_ARTICLE_KEYWORDS}개, evidence 최대 {MAX_ARTICLE_EVIDENCE}개
- 모든 필드 짧게
- JSON 완성 필수"""


SEARCH_USER_PROMPT_TEMPLATE = (
    '"{keyword}" 검색. {start_date}~{end_date}. '
    "{bias_label} 언론: {media_names}. JSON만 출력. 짧게."
)


TRENDING_SYSTEM_PROMPT = """당신은 한국 뉴스 트렌드 분석가입니다. 현재 한국에서 가장 많이 보도되고 있는 뉴스 키워드를 찾아주세요.
응답은 반드시 JSON 형식만 사용하세요. 다른 텍스트 없이 JSON만 출력하세요.

응답 형식:
{
  "keywords": ["키워드1", "키워드2", "키워드3", "키워드4", "키워드5"],
  "descriptions": {
    "키워드1": "간단한 설명 (10자 이내)",
    "키워드2": "간단한 설명",
    ...
  }
}"""

TRENDING_USER_PROMPT = """오늘 한국 뉴스에서 가장 많이 다뤄지고 있는 주요 이슈 키워드 5개를 찾아주세요.
정치, 경제, 사회, 국제 등 다양한 분야에서 현재 가장 화제가 되는 키워드를 선정해주세요.
JSON 형식으로만 응답하세요."""


def build_search_prompts(
    keyword: str,
    start_date: str,
    end_date: str,
    bias: MediaBias,
    media_names: List[str],
) -> Tuple[str, str]:
    """
    Build the (system, user) prompt pair for one bias group's news search.

    Keyword presence is not checked here; the route rejects empty keywords.
    """
    user_prompt = SEARCH_USER_PROMPT_TEMPLATE.format(
        keyword=keyword,
        start_date=start_date,
        end_date=end_date,
        bias_label=get_bias_label(bias),
        media_names=", ".join(media_names),
    )
    return SEARCH_SYSTEM_PROMPT, user_prompt


def build_trending_prompts() -> Tuple[str, str]:
    return TRENDING_SYSTEM_PROMPT, TRENDING_USER_PROMPT
